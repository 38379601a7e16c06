# workflows/services/lifecycle.py

"""
LIFECYCLE STAMPS

Computes the timestamp fields that accompany entry into a status.

- first_entry_stamps: written only when the record has no value yet.
  The stamp overrides a value sent in the same request, unless the
  resource type lets the caller set it (caller_sets_first_entry)
- entry_stamps: always written with "now"

Only called for accepted status changes.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from django.utils import timezone


def stamps_for(
    resource_type,
    to_status: str,
    record: Any,
    *,
    fields: Mapping[str, Any] | None = None,
    now: datetime | None = None,
) -> dict[str, datetime]:
    fields = fields or {}
    now = now or timezone.now()
    stamps: dict[str, datetime] = {}

    first_field = resource_type.first_entry_stamps.get(to_status)
    if first_field:
        already_set = getattr(record, first_field, None) is not None
        caller_value = (
            resource_type.caller_sets_first_entry
            and fields.get(first_field) is not None
        )
        if not already_set and not caller_value:
            stamps[first_field] = now

    always_field = resource_type.entry_stamps.get(to_status)
    if always_field:
        stamps[always_field] = now

    return stamps
