# legal/views.py

from drf_spectacular.utils import extend_schema, extend_schema_view

from legal.models import LegalCase
from legal.serializers import (
    LegalCaseCreateSerializer,
    LegalCaseSerializer,
    LegalCaseUpdateSerializer,
)
from workflows.api.viewsets import StoreScopedRecordViewSet


@extend_schema_view(
    create=extend_schema(request=LegalCaseCreateSerializer, responses={201: LegalCaseSerializer}),
    partial_update=extend_schema(
        request=LegalCaseUpdateSerializer, responses={200: LegalCaseSerializer}
    ),
)
class LegalCaseViewSet(StoreScopedRecordViewSet):
    resource_tag = "legal_case"
    model = LegalCase

    serializer_class = LegalCaseSerializer
    create_serializer_class = LegalCaseCreateSerializer
    update_serializer_class = LegalCaseUpdateSerializer

    filterset_fields = ["status", "case_type", "priority", "assigned_to"]

    def get_serializer_context(self):
        context = super().get_serializer_context()
        if self.action == "create":
            context["store"] = self.get_store()
        return context
