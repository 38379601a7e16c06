# subscriptions/serializers.py

from rest_framework import serializers

from subscriptions.models import Subscription


class SubscriptionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Subscription
        fields = [
            "id",
            "store",
            "customer_id",
            "plan_name",
            "billing_period",
            "amount",
            "status",
            "auto_renew",
            "next_billing_at",
            "recurrence",
            "cancelled_at",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class SubscriptionCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Subscription
        fields = [
            "customer_id",
            "plan_name",
            "billing_period",
            "amount",
            "next_billing_at",
            "auto_renew",
            "recurrence",
            "notes",
        ]
        extra_kwargs = {"amount": {"min_value": 0}}


class SubscriptionUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Subscription
        fields = [
            "plan_name",
            "billing_period",
            "amount",
            "status",
            "next_billing_at",
            "auto_renew",
            "recurrence",
            "notes",
        ]
        extra_kwargs = {"amount": {"min_value": 0}}
