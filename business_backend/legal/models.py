# legal/models.py

from decimal import Decimal

from django.db import models

from workflows.models import StoreScopedRecord
from workflows.resource_types import LEGAL_CASE


class LegalCase(StoreScopedRecord):
    """
    Matter handled by a legal practice.

    open -> in_progress <-> pending_hearing -> settled -> closed -> archived
    (closed is reachable from every working status)
    """

    CASE_TYPE_CHOICES = [
        ("civil", "Civil"),
        ("criminal", "Criminal"),
        ("corporate", "Corporate"),
        ("family", "Family"),
        ("real_estate", "Real estate"),
        ("immigration", "Immigration"),
        ("tax", "Tax"),
        ("labor", "Labor"),
        ("other", "Other"),
    ]

    PRIORITY_CHOICES = [
        ("low", "Low"),
        ("medium", "Medium"),
        ("high", "High"),
        ("urgent", "Urgent"),
    ]

    case_number = models.CharField(max_length=100)
    title = models.CharField(max_length=500)
    customer_id = models.UUIDField(null=True, blank=True)
    assigned_to = models.UUIDField(null=True, blank=True)

    case_type = models.CharField(max_length=16, choices=CASE_TYPE_CHOICES, default="other")
    priority = models.CharField(max_length=16, choices=PRIORITY_CHOICES, default="medium")
    description = models.TextField(blank=True)

    court_name = models.CharField(max_length=500, blank=True)
    filing_date = models.DateField(null=True, blank=True)
    next_hearing = models.DateTimeField(null=True, blank=True)

    total_fees = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))
    amount_paid = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))

    closed_at = models.DateTimeField(null=True, blank=True)
    archived_at = models.DateTimeField(null=True, blank=True)

    status = models.CharField(
        max_length=32,
        choices=LEGAL_CASE.status_choices(),
        default=LEGAL_CASE.initial_status,
    )

    class Meta(StoreScopedRecord.Meta):
        constraints = [
            models.UniqueConstraint(
                fields=["store", "case_number"],
                name="uniq_case_number_per_store",
            ),
        ]

    def __str__(self):
        return f"{self.case_number} | {self.title}"
