# legal/serializers.py

from rest_framework import serializers

from legal.models import LegalCase

_EDITABLE_FIELDS = [
    "customer_id",
    "assigned_to",
    "title",
    "case_type",
    "priority",
    "description",
    "court_name",
    "filing_date",
    "next_hearing",
    "total_fees",
    "notes",
]


class LegalCaseSerializer(serializers.ModelSerializer):
    balance_due = serializers.SerializerMethodField()

    class Meta:
        model = LegalCase
        fields = [
            "id",
            "store",
            "case_number",
            "status",
            *_EDITABLE_FIELDS,
            "amount_paid",
            "balance_due",
            "closed_at",
            "archived_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_balance_due(self, obj):
        return str(obj.total_fees - obj.amount_paid)


class LegalCaseCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = LegalCase
        fields = ["case_number", *_EDITABLE_FIELDS]
        extra_kwargs = {"total_fees": {"min_value": 0}}

    def validate_case_number(self, value):
        store = self.context.get("store")
        if store is not None and LegalCase.objects.filter(
            store=store, case_number=value
        ).exists():
            raise serializers.ValidationError("A case with this number already exists.")
        return value


class LegalCaseUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = LegalCase
        fields = ["status", *_EDITABLE_FIELDS, "amount_paid"]
        extra_kwargs = {
            "total_fees": {"min_value": 0},
            "amount_paid": {"min_value": 0},
        }
