# subscriptions/models.py

from django.db import models

from workflows.models import StoreScopedRecord
from workflows.resource_types import SUBSCRIPTION


class Subscription(StoreScopedRecord):
    """
    Recurring customer plan.

    active <-> paused, then cancelled | expired.
    `recurrence` holds the free-form schedule descriptor
    (e.g. {"interval": 1, "unit": "month", "day_of_month": 15}).
    """

    BILLING_PERIOD_CHOICES = [
        ("weekly", "Weekly"),
        ("monthly", "Monthly"),
        ("quarterly", "Quarterly"),
        ("yearly", "Yearly"),
    ]

    customer_id = models.UUIDField()
    plan_name = models.CharField(max_length=200)
    billing_period = models.CharField(
        max_length=16, choices=BILLING_PERIOD_CHOICES, default="monthly"
    )
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    auto_renew = models.BooleanField(default=True)
    next_billing_at = models.DateTimeField(null=True, blank=True)
    recurrence = models.JSONField(default=dict, blank=True)
    cancelled_at = models.DateTimeField(null=True, blank=True)

    status = models.CharField(
        max_length=32,
        choices=SUBSCRIPTION.status_choices(),
        default=SUBSCRIPTION.initial_status,
    )

    def __str__(self):
        return f"{self.plan_name} | {self.status}"
