"""
======================================================
PATH: workflows/api/viewsets.py
======================================================
STORE-SCOPED RECORD VIEWSET (BASE)

Every vertical (deals, admissions, lab orders, complaints,
subscriptions, reservations, legal cases) exposes the same surface:

    GET    /<resource>/              list (filter: ?status=)
    POST   /<resource>/              create (store + initial status set here)
    GET    /<resource>/<uuid>/       retrieve
    PATCH  /<resource>/<uuid>/       update through the transition engine
    DELETE /<resource>/<uuid>/       only in the resource's deletable statuses

Security:
- Requires IsAuthenticated
- Every query is scoped to the caller's store (403 if they have none)

Error mapping (PATCH):
- RecordNotFoundError    -> 404 RECORD_NOT_FOUND
- IllegalTransitionError -> 400 ILLEGAL_TRANSITION
- NoChangesError         -> 400 NO_CHANGES
- StorageError           -> 500 STORAGE_ERROR
======================================================
"""

from __future__ import annotations

from rest_framework import mixins, status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle

from store.selectors import get_store_for_user
from workflows.api.errors import error_response, workflow_error_response
from workflows.resource_types import ResourceType, get_resource_type
from workflows.services.exceptions import WorkflowError
from workflows.services.record_store import DjangoRecordStore
from workflows.services.transition_orchestrator import apply_update


class StoreScopedRecordViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    resource_tag: str = None
    model = None

    serializer_class = None
    create_serializer_class = None
    update_serializer_class = None

    permission_classes = [IsAuthenticated]
    filterset_fields = ["status"]
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]
    throttle_scope = "record_update"

    @property
    def resource_type(self) -> ResourceType:
        return get_resource_type(self.resource_tag)

    # --------------------------------------------------
    # TENANT
    # --------------------------------------------------

    def get_store(self):
        if not hasattr(self, "_store"):
            self._store = get_store_for_user(self.request.user)
        return self._store

    def get_queryset(self):
        return self.model.objects.filter(store=self.get_store())

    def get_serializer_class(self):
        if self.action == "create" and self.create_serializer_class:
            return self.create_serializer_class
        if self.action == "partial_update" and self.update_serializer_class:
            return self.update_serializer_class
        return self.serializer_class

    def get_throttles(self):
        throttles = super().get_throttles()
        if self.action == "partial_update":
            throttles.append(ScopedRateThrottle())
        return throttles

    def get_record_store(self):
        return DjangoRecordStore(self.model)

    # --------------------------------------------------
    # CREATE
    # --------------------------------------------------

    def get_create_defaults(self) -> dict:
        return {}

    def create(self, request, *args, **kwargs):
        store = self.get_store()

        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        instance = serializer.save(
            store=store,
            status=self.resource_type.initial_status,
            **self.get_create_defaults(),
        )

        return Response(
            self.serializer_class(instance).data,
            status=status.HTTP_201_CREATED,
        )

    # --------------------------------------------------
    # UPDATE (TRANSITION ENGINE)
    # --------------------------------------------------

    def partial_update(self, request, *args, **kwargs):
        return self._apply_update(request, pk=kwargs.get("pk"))

    def _apply_update(self, request, pk=None):
        store = self.get_store()

        command = self.get_serializer(data=request.data, partial=True)
        command.is_valid(raise_exception=True)

        fields = dict(command.validated_data)
        requested_status = fields.pop("status", None)

        try:
            record = apply_update(
                resource_type=self.resource_type,
                record_store=self.get_record_store(),
                record_id=pk,
                store_id=store.id,
                status=requested_status,
                fields=fields,
            )
        except WorkflowError as exc:
            return workflow_error_response(exc)

        return Response(self.serializer_class(record).data, status=status.HTTP_200_OK)

    # --------------------------------------------------
    # DELETE
    # --------------------------------------------------

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()

        if not self.resource_type.can_delete(instance.status):
            allowed = " or ".join(sorted(self.resource_type.deletable_states))
            return error_response(
                code="DELETE_NOT_ALLOWED",
                message=f"Only {allowed} {self.resource_type.label.lower()}s can be deleted",
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        instance.delete()
        return Response({"success": True}, status=status.HTTP_200_OK)
