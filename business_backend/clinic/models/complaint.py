# clinic/models/complaint.py

from django.db import models

from workflows.models import StoreScopedRecord
from workflows.resource_types import COMPLAINT


class MedicalComplaint(StoreScopedRecord):
    """
    Patient complaint handled through open -> assigned -> reviewed -> resolved -> closed.
    Any open status can be closed directly.
    """

    CATEGORY_CHOICES = [
        ("wait_time", "Wait time"),
        ("treatment", "Treatment"),
        ("staff_behavior", "Staff behavior"),
        ("facility", "Facility"),
        ("billing", "Billing"),
        ("other", "Other"),
    ]

    SEVERITY_CHOICES = [
        ("minor", "Minor"),
        ("moderate", "Moderate"),
        ("serious", "Serious"),
    ]

    patient_id = models.UUIDField(null=True, blank=True)
    encounter_id = models.UUIDField(null=True, blank=True)
    assigned_to = models.UUIDField(null=True, blank=True)

    category = models.CharField(max_length=32, choices=CATEGORY_CHOICES, default="other")
    severity = models.CharField(max_length=16, choices=SEVERITY_CHOICES, default="minor")
    description = models.TextField()
    resolution = models.TextField(null=True, blank=True)

    resolved_at = models.DateTimeField(null=True, blank=True)
    closed_at = models.DateTimeField(null=True, blank=True)

    status = models.CharField(
        max_length=32,
        choices=COMPLAINT.status_choices(),
        default=COMPLAINT.initial_status,
    )

    def __str__(self):
        return f"Complaint {self.id} | {self.status}"
