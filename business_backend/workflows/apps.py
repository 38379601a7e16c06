# workflows/apps.py

"""
WORKFLOWS APP CONFIG

Status-transition engine shared by every store-scoped record
(deals, admissions, lab orders, complaints, subscriptions,
reservations, legal cases).
"""

from django.apps import AppConfig


class WorkflowsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "workflows"
    verbose_name = "Record Workflows"
