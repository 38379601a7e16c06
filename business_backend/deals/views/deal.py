# deals/views/deal.py

"""
DEAL VIEWSET

PATCH rules:
- lead -> viewing -> offer -> contract -> closed (lost / withdrawn exits)
- viewing/offer/contract dates are captured the first time
- closing computes commission_amount and its agent/company split

DELETE rules:
- Only lead or lost deals can be deleted
"""

from drf_spectacular.utils import extend_schema, extend_schema_view

from deals.models import Deal
from deals.serializers import (
    DealCreateSerializer,
    DealSerializer,
    DealUpdateSerializer,
)
from workflows.api.viewsets import StoreScopedRecordViewSet


@extend_schema_view(
    create=extend_schema(request=DealCreateSerializer, responses={201: DealSerializer}),
    partial_update=extend_schema(
        request=DealUpdateSerializer, responses={200: DealSerializer}
    ),
)
class DealViewSet(StoreScopedRecordViewSet):
    resource_tag = "deal"
    model = Deal

    serializer_class = DealSerializer
    create_serializer_class = DealCreateSerializer
    update_serializer_class = DealUpdateSerializer

    filterset_fields = ["status", "deal_type", "agent_id"]
