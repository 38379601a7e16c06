# hospitality/models.py

from decimal import Decimal

from django.db import models

from workflows.models import StoreScopedRecord
from workflows.resource_types import RESERVATION


class Reservation(StoreScopedRecord):
    """
    Hotel / guesthouse / camping reservation.

    confirmed -> checked_in -> checked_out
    confirmed -> cancelled | no_show

    actual_check_in / actual_check_out are captured on the transition
    unless the front desk supplies them explicitly.
    """

    DEPOSIT_STATUS_CHOICES = [
        ("pending", "Pending"),
        ("paid", "Paid"),
        ("refunded", "Refunded"),
    ]

    SOURCE_CHOICES = [
        ("direct", "Direct"),
        ("website", "Website"),
        ("booking_com", "Booking.com"),
        ("airbnb", "Airbnb"),
        ("expedia", "Expedia"),
        ("other", "Other"),
    ]

    unit_id = models.UUIDField()
    guest_id = models.UUIDField()

    check_in = models.DateField()
    check_out = models.DateField()
    actual_check_in = models.DateTimeField(null=True, blank=True)
    actual_check_out = models.DateTimeField(null=True, blank=True)
    cancelled_at = models.DateTimeField(null=True, blank=True)

    adults = models.PositiveSmallIntegerField(default=1)
    children = models.PositiveSmallIntegerField(default=0)

    rate_per_night = models.DecimalField(max_digits=12, decimal_places=2)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2)
    deposit_amount = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )
    deposit_status = models.CharField(
        max_length=16, choices=DEPOSIT_STATUS_CHOICES, default="pending"
    )

    source = models.CharField(max_length=16, choices=SOURCE_CHOICES, default="direct")
    special_requests = models.TextField(blank=True)

    status = models.CharField(
        max_length=32,
        choices=RESERVATION.status_choices(),
        default=RESERVATION.initial_status,
    )

    def __str__(self):
        return f"Reservation {self.check_in} -> {self.check_out} | {self.status}"
