# clinic/serializers.py

from rest_framework import serializers

from clinic.models import Admission, LabOrder, MedicalComplaint

_RECORD_META_FIELDS = ["id", "store", "status", "notes", "created_at", "updated_at"]


# ======================================================
# ADMISSIONS
# ======================================================

class AdmissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Admission
        fields = _RECORD_META_FIELDS + [
            "patient_id",
            "attending_staff_id",
            "admit_diagnosis",
            "admit_at",
            "discharge_at",
            "discharge_summary",
        ]
        read_only_fields = fields


class AdmissionCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Admission
        fields = [
            "patient_id",
            "attending_staff_id",
            "admit_diagnosis",
            "admit_at",
            "notes",
        ]


class AdmissionUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Admission
        fields = [
            "status",
            "attending_staff_id",
            "discharge_at",
            "discharge_summary",
            "notes",
        ]


# ======================================================
# LAB ORDERS
# ======================================================

class LabOrderSerializer(serializers.ModelSerializer):
    class Meta:
        model = LabOrder
        fields = _RECORD_META_FIELDS + [
            "patient_id",
            "encounter_id",
            "ordered_by",
            "order_type",
            "test_name",
            "test_code",
            "urgency",
            "specimen_type",
            "collection_time",
            "completed_at",
        ]
        read_only_fields = fields


class LabOrderCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = LabOrder
        fields = [
            "patient_id",
            "encounter_id",
            "ordered_by",
            "order_type",
            "test_name",
            "test_code",
            "urgency",
            "specimen_type",
            "collection_time",
            "notes",
        ]


class LabOrderUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = LabOrder
        fields = [
            "status",
            "specimen_type",
            "collection_time",
            "notes",
        ]


# ======================================================
# COMPLAINTS
# ======================================================

class MedicalComplaintSerializer(serializers.ModelSerializer):
    class Meta:
        model = MedicalComplaint
        fields = _RECORD_META_FIELDS + [
            "patient_id",
            "encounter_id",
            "assigned_to",
            "category",
            "severity",
            "description",
            "resolution",
            "resolved_at",
            "closed_at",
        ]
        read_only_fields = fields


class MedicalComplaintCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = MedicalComplaint
        fields = [
            "patient_id",
            "encounter_id",
            "category",
            "severity",
            "description",
        ]


class MedicalComplaintUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = MedicalComplaint
        fields = [
            "status",
            "assigned_to",
            "resolution",
            "severity",
        ]
