import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


def _record_fields(related_name):
    return [
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
            "store",
            models.ForeignKey(
                on_delete=django.db.models.deletion.CASCADE,
                related_name=related_name,
                to="store.store",
            ),
        ),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("store", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Admission",
            fields=_record_fields("clinic_admission_set")
            + [
                ("patient_id", models.UUIDField()),
                ("attending_staff_id", models.UUIDField(blank=True, null=True)),
                ("admit_diagnosis", models.TextField(blank=True)),
                ("admit_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("discharge_at", models.DateTimeField(blank=True, null=True)),
                ("discharge_summary", models.TextField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("admitted", "Admitted"),
                            ("discharged", "Discharged"),
                            ("transferred", "Transferred"),
                        ],
                        default="admitted",
                        max_length=32,
                    ),
                ),
            ],
            options={"ordering": ["-created_at"], "abstract": False},
        ),
        migrations.CreateModel(
            name="LabOrder",
            fields=_record_fields("clinic_laborder_set")
            + [
                ("patient_id", models.UUIDField()),
                ("encounter_id", models.UUIDField(blank=True, null=True)),
                ("ordered_by", models.UUIDField(blank=True, null=True)),
                (
                    "order_type",
                    models.CharField(
                        choices=[("lab", "Lab"), ("imaging", "Imaging"), ("other", "Other")],
                        default="lab",
                        max_length=16,
                    ),
                ),
                ("test_name", models.CharField(max_length=300)),
                ("test_code", models.CharField(blank=True, max_length=50)),
                (
                    "urgency",
                    models.CharField(
                        choices=[
                            ("routine", "Routine"),
                            ("urgent", "Urgent"),
                            ("stat", "STAT"),
                        ],
                        default="routine",
                        max_length=16,
                    ),
                ),
                ("specimen_type", models.CharField(blank=True, max_length=100)),
                ("collection_time", models.DateTimeField(blank=True, null=True)),
                ("completed_at", models.DateTimeField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("cancelled", "Cancelled"),
                            ("collected", "Collected"),
                            ("completed", "Completed"),
                            ("ordered", "Ordered"),
                            ("processing", "Processing"),
                        ],
                        default="ordered",
                        max_length=32,
                    ),
                ),
            ],
            options={"ordering": ["-created_at"], "abstract": False},
        ),
        migrations.CreateModel(
            name="MedicalComplaint",
            fields=_record_fields("clinic_medicalcomplaint_set")
            + [
                ("patient_id", models.UUIDField(blank=True, null=True)),
                ("encounter_id", models.UUIDField(blank=True, null=True)),
                ("assigned_to", models.UUIDField(blank=True, null=True)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("wait_time", "Wait time"),
                            ("treatment", "Treatment"),
                            ("staff_behavior", "Staff behavior"),
                            ("facility", "Facility"),
                            ("billing", "Billing"),
                            ("other", "Other"),
                        ],
                        default="other",
                        max_length=32,
                    ),
                ),
                (
                    "severity",
                    models.CharField(
                        choices=[
                            ("minor", "Minor"),
                            ("moderate", "Moderate"),
                            ("serious", "Serious"),
                        ],
                        default="minor",
                        max_length=16,
                    ),
                ),
                ("description", models.TextField()),
                ("resolution", models.TextField(blank=True, null=True)),
                ("resolved_at", models.DateTimeField(blank=True, null=True)),
                ("closed_at", models.DateTimeField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("assigned", "Assigned"),
                            ("closed", "Closed"),
                            ("open", "Open"),
                            ("resolved", "Resolved"),
                            ("reviewed", "Reviewed"),
                        ],
                        default="open",
                        max_length=32,
                    ),
                ),
            ],
            options={"ordering": ["-created_at"], "abstract": False},
        ),
    ]
