# deals/serializers/deal.py

from rest_framework import serializers

from deals.models import Deal

_RATE_KWARGS = {"min_value": 0, "max_value": 100}
_PRICE_KWARGS = {"min_value": 0}


class DealSerializer(serializers.ModelSerializer):
    """
    Read serializer (list / retrieve / PATCH response).
    """

    commission_is_balanced = serializers.BooleanField(read_only=True)

    class Meta:
        model = Deal
        fields = [
            "id",
            "store",
            "deal_number",
            "property_id",
            "customer_id",
            "agent_id",
            "status",
            "deal_type",
            "asking_price",
            "offer_price",
            "final_price",
            "commission_rate",
            "agent_share_rate",
            "commission_amount",
            "agent_share_amount",
            "company_share_amount",
            "commission_is_balanced",
            "viewing_date",
            "offer_date",
            "contract_date",
            "closed_date",
            "withdrawn_date",
            "notes",
            "metadata",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class DealCreateSerializer(serializers.ModelSerializer):
    """
    New deals always start as leads; status is not accepted here.
    """

    class Meta:
        model = Deal
        fields = [
            "property_id",
            "customer_id",
            "agent_id",
            "deal_type",
            "asking_price",
            "commission_rate",
            "agent_share_rate",
            "notes",
        ]
        extra_kwargs = {
            "asking_price": _PRICE_KWARGS,
            "commission_rate": _RATE_KWARGS,
            "agent_share_rate": _RATE_KWARGS,
        }


class DealUpdateSerializer(serializers.ModelSerializer):
    """
    PATCH payload. Shape/type validation only: status legality,
    lifecycle dates and commissions are owned by the transition engine.
    """

    class Meta:
        model = Deal
        fields = [
            "property_id",
            "customer_id",
            "agent_id",
            "status",
            "deal_type",
            "asking_price",
            "offer_price",
            "final_price",
            "commission_rate",
            "agent_share_rate",
            "viewing_date",
            "offer_date",
            "contract_date",
            "notes",
            "metadata",
        ]
        extra_kwargs = {
            "asking_price": _PRICE_KWARGS,
            "offer_price": _PRICE_KWARGS,
            "final_price": _PRICE_KWARGS,
            "commission_rate": _RATE_KWARGS,
            "agent_share_rate": _RATE_KWARGS,
        }
