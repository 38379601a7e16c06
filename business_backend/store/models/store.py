# store/models/store.py

import uuid

from django.conf import settings
from django.db import models
from django.db.models import Q


class Store(models.Model):
    """
    The tenant: one business owned by one account.

    Guarantees:
    - Every business record (deal, admission, reservation, ...) belongs
      to exactly one store
    - code is optional, but if provided it must be unique
    """

    BUSINESS_RETAIL = "retail"
    BUSINESS_HOSPITALITY = "hospitality"
    BUSINESS_CLINIC = "clinic"
    BUSINESS_LEGAL = "legal"
    BUSINESS_REAL_ESTATE = "real_estate"
    BUSINESS_SALON = "salon"

    BUSINESS_TYPE_CHOICES = [
        (BUSINESS_RETAIL, "Retail"),
        (BUSINESS_HOSPITALITY, "Hospitality"),
        (BUSINESS_CLINIC, "Clinic"),
        (BUSINESS_LEGAL, "Legal practice"),
        (BUSINESS_REAL_ESTATE, "Real estate"),
        (BUSINESS_SALON, "Salon"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="stores",
    )

    name = models.CharField(max_length=255)

    code = models.CharField(
        max_length=50,
        null=True,
        blank=True,
        help_text="Unique store code (optional). If set, must be unique.",
        db_index=True,
    )

    business_type = models.CharField(
        max_length=32,
        choices=BUSINESS_TYPE_CHOICES,
        default=BUSINESS_RETAIL,
    )

    address = models.TextField(blank=True)
    phone = models.CharField(max_length=50, blank=True)

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        constraints = [
            models.UniqueConstraint(
                fields=["code"],
                condition=Q(code__isnull=False) & ~Q(code=""),
                name="uniq_store_code_when_present",
            ),
        ]

    def __str__(self):
        c = (self.code or "").strip()
        if c:
            return f"{self.name} ({c})"
        return self.name
