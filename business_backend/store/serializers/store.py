# store/serializers/store.py

from rest_framework import serializers

from store.models import Store


class StoreSerializer(serializers.ModelSerializer):
    """
    Serializer for a tenant store.
    The owner is always the authenticated user (set in the view).
    """

    class Meta:
        model = Store
        fields = [
            "id",
            "name",
            "code",
            "business_type",
            "address",
            "phone",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "created_at",
            "updated_at",
        ]


class PublicStoreSerializer(serializers.ModelSerializer):
    class Meta:
        model = Store
        fields = ["id", "name", "business_type", "address", "phone"]
        read_only_fields = fields
