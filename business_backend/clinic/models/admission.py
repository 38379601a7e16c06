# clinic/models/admission.py

from django.db import models
from django.utils import timezone

from workflows.models import StoreScopedRecord
from workflows.resource_types import ADMISSION


class Admission(StoreScopedRecord):
    """
    Inpatient stay: admitted -> discharged | transferred.
    discharge_at is captured automatically on discharge unless supplied.
    """

    patient_id = models.UUIDField()
    attending_staff_id = models.UUIDField(null=True, blank=True)

    admit_diagnosis = models.TextField(blank=True)
    admit_at = models.DateTimeField(default=timezone.now)
    discharge_at = models.DateTimeField(null=True, blank=True)
    discharge_summary = models.TextField(null=True, blank=True)

    status = models.CharField(
        max_length=32,
        choices=ADMISSION.status_choices(),
        default=ADMISSION.initial_status,
    )

    def __str__(self):
        return f"Admission {self.id} | {self.status}"
