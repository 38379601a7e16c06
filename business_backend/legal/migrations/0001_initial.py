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
            name="LegalCase",
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
                ("case_number", models.CharField(max_length=100)),
                ("title", models.CharField(max_length=500)),
                ("customer_id", models.UUIDField(blank=True, null=True)),
                ("assigned_to", models.UUIDField(blank=True, null=True)),
                (
                    "case_type",
                    models.CharField(
                        choices=[
                            ("civil", "Civil"),
                            ("criminal", "Criminal"),
                            ("corporate", "Corporate"),
                            ("family", "Family"),
                            ("real_estate", "Real estate"),
                            ("immigration", "Immigration"),
                            ("tax", "Tax"),
                            ("labor", "Labor"),
                            ("other", "Other"),
                        ],
                        default="other",
                        max_length=16,
                    ),
                ),
                (
                    "priority",
                    models.CharField(
                        choices=[
                            ("low", "Low"),
                            ("medium", "Medium"),
                            ("high", "High"),
                            ("urgent", "Urgent"),
                        ],
                        default="medium",
                        max_length=16,
                    ),
                ),
                ("description", models.TextField(blank=True)),
                ("court_name", models.CharField(blank=True, max_length=500)),
                ("filing_date", models.DateField(blank=True, null=True)),
                ("next_hearing", models.DateTimeField(blank=True, null=True)),
                (
                    "total_fees",
                    models.DecimalField(
                        decimal_places=2, default=Decimal("0.00"), max_digits=14
                    ),
                ),
                (
                    "amount_paid",
                    models.DecimalField(
                        decimal_places=2, default=Decimal("0.00"), max_digits=14
                    ),
                ),
                ("closed_at", models.DateTimeField(blank=True, null=True)),
                ("archived_at", models.DateTimeField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("archived", "Archived"),
                            ("closed", "Closed"),
                            ("in_progress", "In Progress"),
                            ("open", "Open"),
                            ("pending_hearing", "Pending Hearing"),
                            ("settled", "Settled"),
                        ],
                        default="open",
                        max_length=32,
                    ),
                ),
                (
                    "store",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="legal_legalcase_set",
                        to="store.store",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "abstract": False,
                "constraints": [
                    models.UniqueConstraint(
                        fields=("store", "case_number"),
                        name="uniq_case_number_per_store",
                    )
                ],
            },
        ),
    ]
