# clinic/models/lab_order.py

from django.db import models

from workflows.models import StoreScopedRecord
from workflows.resource_types import LAB_ORDER


class LabOrder(StoreScopedRecord):
    ORDER_TYPE_CHOICES = [
        ("lab", "Lab"),
        ("imaging", "Imaging"),
        ("other", "Other"),
    ]

    URGENCY_CHOICES = [
        ("routine", "Routine"),
        ("urgent", "Urgent"),
        ("stat", "STAT"),
    ]

    patient_id = models.UUIDField()
    encounter_id = models.UUIDField(null=True, blank=True)
    ordered_by = models.UUIDField(null=True, blank=True)

    order_type = models.CharField(max_length=16, choices=ORDER_TYPE_CHOICES, default="lab")
    test_name = models.CharField(max_length=300)
    test_code = models.CharField(max_length=50, blank=True)
    urgency = models.CharField(max_length=16, choices=URGENCY_CHOICES, default="routine")
    specimen_type = models.CharField(max_length=100, blank=True)

    collection_time = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)

    status = models.CharField(
        max_length=32,
        choices=LAB_ORDER.status_choices(),
        default=LAB_ORDER.initial_status,
    )

    def __str__(self):
        return f"{self.test_name} | {self.status}"
