from django.contrib import admin

from clinic.models import Admission, LabOrder, MedicalComplaint


@admin.register(Admission)
class AdmissionAdmin(admin.ModelAdmin):
    list_display = ("id", "store", "patient_id", "status", "admit_at", "discharge_at")
    list_filter = ("status",)


@admin.register(LabOrder)
class LabOrderAdmin(admin.ModelAdmin):
    list_display = ("test_name", "store", "urgency", "status", "collection_time")
    list_filter = ("status", "urgency")
    search_fields = ("test_name", "test_code")


@admin.register(MedicalComplaint)
class MedicalComplaintAdmin(admin.ModelAdmin):
    list_display = ("id", "store", "category", "severity", "status", "created_at")
    list_filter = ("status", "severity", "category")
