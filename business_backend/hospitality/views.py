# hospitality/views.py

from drf_spectacular.utils import extend_schema, extend_schema_view

from hospitality.models import Reservation
from hospitality.serializers import (
    ReservationCreateSerializer,
    ReservationSerializer,
    ReservationUpdateSerializer,
)
from workflows.api.viewsets import StoreScopedRecordViewSet


@extend_schema_view(
    create=extend_schema(request=ReservationCreateSerializer, responses={201: ReservationSerializer}),
    partial_update=extend_schema(
        request=ReservationUpdateSerializer, responses={200: ReservationSerializer}
    ),
)
class ReservationViewSet(StoreScopedRecordViewSet):
    resource_tag = "reservation"
    model = Reservation

    serializer_class = ReservationSerializer
    create_serializer_class = ReservationCreateSerializer
    update_serializer_class = ReservationUpdateSerializer

    filterset_fields = ["status", "unit_id", "guest_id", "check_in"]
