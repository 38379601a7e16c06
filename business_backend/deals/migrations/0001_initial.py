import uuid
from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("store", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Deal",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("notes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "deal_number",
                    models.CharField(
                        blank=True,
                        help_text="System-generated deal reference",
                        max_length=64,
                        unique=True,
                    ),
                ),
                ("property_id", models.UUIDField(blank=True, null=True)),
                ("customer_id", models.UUIDField(blank=True, null=True)),
                ("agent_id", models.UUIDField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("closed", "Closed"),
                            ("contract", "Contract"),
                            ("lead", "Lead"),
                            ("lost", "Lost"),
                            ("offer", "Offer"),
                            ("viewing", "Viewing"),
                            ("withdrawn", "Withdrawn"),
                        ],
                        default="lead",
                        max_length=32,
                    ),
                ),
                (
                    "deal_type",
                    models.CharField(
                        choices=[("sale", "Sale"), ("rent", "Rent"), ("lease", "Lease")],
                        default="sale",
                        max_length=16,
                    ),
                ),
                (
                    "asking_price",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=16, null=True
                    ),
                ),
                (
                    "offer_price",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=16, null=True
                    ),
                ),
                (
                    "final_price",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=16, null=True
                    ),
                ),
                (
                    "commission_rate",
                    models.DecimalField(
                        decimal_places=2, default=Decimal("5"), max_digits=5
                    ),
                ),
                (
                    "agent_share_rate",
                    models.DecimalField(
                        decimal_places=2, default=Decimal("50"), max_digits=5
                    ),
                ),
                (
                    "commission_amount",
                    models.DecimalField(
                        blank=True, decimal_places=6, max_digits=20, null=True
                    ),
                ),
                (
                    "agent_share_amount",
                    models.DecimalField(
                        blank=True, decimal_places=6, max_digits=20, null=True
                    ),
                ),
                (
                    "company_share_amount",
                    models.DecimalField(
                        blank=True, decimal_places=6, max_digits=20, null=True
                    ),
                ),
                ("viewing_date", models.DateTimeField(blank=True, null=True)),
                ("offer_date", models.DateTimeField(blank=True, null=True)),
                ("contract_date", models.DateTimeField(blank=True, null=True)),
                ("closed_date", models.DateTimeField(blank=True, null=True)),
                ("withdrawn_date", models.DateTimeField(blank=True, null=True)),
                ("metadata", models.JSONField(blank=True, default=dict)),
                (
                    "store",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="deals_deal_set",
                        to="store.store",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "abstract": False,
                "indexes": [
                    models.Index(
                        fields=["store", "status"], name="deal_store_status_idx"
                    ),
                    models.Index(fields=["deal_number"], name="deal_number_idx"),
                ],
            },
        ),
    ]
