# hospitality/serializers.py

from rest_framework import serializers

from hospitality.models import Reservation


class ReservationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Reservation
        fields = [
            "id",
            "store",
            "unit_id",
            "guest_id",
            "status",
            "check_in",
            "check_out",
            "actual_check_in",
            "actual_check_out",
            "cancelled_at",
            "adults",
            "children",
            "rate_per_night",
            "total_amount",
            "deposit_amount",
            "deposit_status",
            "source",
            "special_requests",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ReservationCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Reservation
        fields = [
            "unit_id",
            "guest_id",
            "check_in",
            "check_out",
            "adults",
            "children",
            "rate_per_night",
            "total_amount",
            "deposit_amount",
            "source",
            "special_requests",
        ]
        extra_kwargs = {
            "adults": {"min_value": 1},
            "rate_per_night": {"min_value": 0},
            "total_amount": {"min_value": 0},
            "deposit_amount": {"min_value": 0},
        }

    def validate(self, attrs):
        if attrs["check_out"] <= attrs["check_in"]:
            raise serializers.ValidationError(
                {"check_out": "check_out must be after check_in."}
            )
        return attrs


class ReservationUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Reservation
        fields = [
            "status",
            "actual_check_in",
            "actual_check_out",
            "deposit_status",
            "special_requests",
        ]
