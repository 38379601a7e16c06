# workflows/models.py

"""
Abstract base for every store-scoped record driven by the transition engine.

Concrete models declare their own `status` field with choices taken
from their ResourceType descriptor.
"""

import uuid

from django.db import models


class StoreScopedRecord(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    store = models.ForeignKey(
        "store.Store",
        on_delete=models.CASCADE,
        related_name="%(app_label)s_%(class)s_set",
    )

    notes = models.TextField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ["-created_at"]
