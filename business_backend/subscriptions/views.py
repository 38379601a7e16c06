# subscriptions/views.py

from drf_spectacular.utils import extend_schema, extend_schema_view

from subscriptions.models import Subscription
from subscriptions.serializers import (
    SubscriptionCreateSerializer,
    SubscriptionSerializer,
    SubscriptionUpdateSerializer,
)
from workflows.api.viewsets import StoreScopedRecordViewSet


@extend_schema_view(
    create=extend_schema(request=SubscriptionCreateSerializer, responses={201: SubscriptionSerializer}),
    partial_update=extend_schema(
        request=SubscriptionUpdateSerializer, responses={200: SubscriptionSerializer}
    ),
)
class SubscriptionViewSet(StoreScopedRecordViewSet):
    resource_tag = "subscription"
    model = Subscription

    serializer_class = SubscriptionSerializer
    create_serializer_class = SubscriptionCreateSerializer
    update_serializer_class = SubscriptionUpdateSerializer

    filterset_fields = ["status", "customer_id", "billing_period"]
