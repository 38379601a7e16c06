# deals/models/deal.py

import uuid
from decimal import Decimal

from django.db import models
from django.utils import timezone

from workflows.models import StoreScopedRecord
from workflows.resource_types import DEAL
from workflows.services.commission import (
    DEFAULT_AGENT_SHARE_RATE,
    DEFAULT_COMMISSION_RATE,
)


class Deal(StoreScopedRecord):
    """
    A brokerage deal moving from first lead to closing.

    Lifecycle (enforced by the transition engine, never by save()):
        lead -> viewing -> offer -> contract -> closed
        early exits: lost (before contract), withdrawn (from contract)

    On closing, the commission is split into agent and company shares
    from commission_rate / agent_share_rate.
    """

    TYPE_SALE = "sale"
    TYPE_RENT = "rent"
    TYPE_LEASE = "lease"

    DEAL_TYPE_CHOICES = [
        (TYPE_SALE, "Sale"),
        (TYPE_RENT, "Rent"),
        (TYPE_LEASE, "Lease"),
    ]

    deal_number = models.CharField(
        max_length=64,
        unique=True,
        blank=True,
        help_text="System-generated deal reference",
    )

    property_id = models.UUIDField(null=True, blank=True)
    customer_id = models.UUIDField(null=True, blank=True)
    agent_id = models.UUIDField(null=True, blank=True)

    status = models.CharField(
        max_length=32,
        choices=DEAL.status_choices(),
        default=DEAL.initial_status,
    )

    deal_type = models.CharField(
        max_length=16,
        choices=DEAL_TYPE_CHOICES,
        default=TYPE_SALE,
    )

    asking_price = models.DecimalField(
        max_digits=16, decimal_places=2, null=True, blank=True
    )
    offer_price = models.DecimalField(
        max_digits=16, decimal_places=2, null=True, blank=True
    )
    final_price = models.DecimalField(
        max_digits=16, decimal_places=2, null=True, blank=True
    )

    commission_rate = models.DecimalField(
        max_digits=5, decimal_places=2, default=DEFAULT_COMMISSION_RATE
    )
    agent_share_rate = models.DecimalField(
        max_digits=5, decimal_places=2, default=DEFAULT_AGENT_SHARE_RATE
    )

    commission_amount = models.DecimalField(
        max_digits=20, decimal_places=6, null=True, blank=True
    )
    agent_share_amount = models.DecimalField(
        max_digits=20, decimal_places=6, null=True, blank=True
    )
    company_share_amount = models.DecimalField(
        max_digits=20, decimal_places=6, null=True, blank=True
    )

    viewing_date = models.DateTimeField(null=True, blank=True)
    offer_date = models.DateTimeField(null=True, blank=True)
    contract_date = models.DateTimeField(null=True, blank=True)
    closed_date = models.DateTimeField(null=True, blank=True)
    withdrawn_date = models.DateTimeField(null=True, blank=True)

    metadata = models.JSONField(default=dict, blank=True)

    class Meta(StoreScopedRecord.Meta):
        indexes = [
            models.Index(fields=["store", "status"], name="deal_store_status_idx"),
            models.Index(fields=["deal_number"], name="deal_number_idx"),
        ]

    def save(self, *args, **kwargs):
        if not self.deal_number:
            prefix = timezone.now().strftime("DL%Y%m%d")
            self.deal_number = f"{prefix}-{uuid.uuid4().hex[:8].upper()}"
        super().save(*args, **kwargs)

    @property
    def commission_is_balanced(self) -> bool:
        if self.commission_amount is None:
            return True
        agent = self.agent_share_amount or Decimal("0")
        company = self.company_share_amount or Decimal("0")
        return agent + company == self.commission_amount

    def __str__(self):
        return f"{self.deal_number} | {self.status}"
