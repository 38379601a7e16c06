"""
======================================================
PATH: workflows/services/transition_orchestrator.py
======================================================
TRANSITION ORCHESTRATOR (APPLICATION SERVICE)

Purpose:
- Apply a partial update to ONE store-scoped record.
- Enforce the resource type's transition table when status changes.
- Stamp lifecycle timestamps and split commissions on closing.
- Issue exactly one write; never partially apply an update.

Flow:
1) Reject empty requests (NoChangesError) before touching storage
2) Load record scoped by (record_id, store_id)   -> RecordNotFoundError
3) Guard the status change (if any)             -> IllegalTransitionError
4) Build write-set:
     caller fields
     + status
     + lifecycle stamps       (status changing only)
     + commission fields      (target is a closing status)
     + updated_at
5) Single update through the record store        -> StorageError

Nothing here retries: a failed state-changing write is surfaced as-is.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping

from django.db import transaction
from django.utils import timezone

from workflows.resource_types import ResourceType
from workflows.services.commission import commission_fields_for
from workflows.services.exceptions import (
    IllegalTransitionError,
    NoChangesError,
    RecordNotFoundError,
    StorageError,
)
from workflows.services.guards import validate_transition
from workflows.services.lifecycle import stamps_for
from workflows.services.record_store import RecordStore

logger = logging.getLogger("workflows")


def _build_write_set(
    *,
    resource_type: ResourceType,
    record,
    status: str | None,
    fields: Mapping[str, Any],
    now: datetime,
) -> dict[str, Any]:
    write_set = dict(fields)

    if status is not None:
        write_set["status"] = status

        if status != record.status:
            write_set.update(
                stamps_for(resource_type, status, record, fields=fields, now=now)
            )

        if resource_type.is_closing(status) and resource_type.commission_policy:
            write_set.update(
                commission_fields_for(resource_type.commission_policy, record, fields)
            )

    write_set["updated_at"] = now
    return write_set


@transaction.atomic
def apply_update(
    *,
    resource_type: ResourceType,
    record_store: RecordStore,
    record_id,
    store_id,
    status: str | None = None,
    fields: Mapping[str, Any] | None = None,
    now: datetime | None = None,
):
    """
    Returns the updated record as read back from storage.
    """
    fields = dict(fields or {})
    if "status" in fields:
        requested = fields.pop("status")
        status = requested if status is None else status

    if status is None and not fields:
        raise NoChangesError()

    log_context = {
        "resource_type": resource_type.tag,
        "record_id": str(record_id),
        "store_id": str(store_id),
    }

    try:
        record = record_store.get(record_id=record_id, store_id=store_id)
    except StorageError:
        logger.exception("Record load failed", extra=log_context)
        raise

    if record is None:
        raise RecordNotFoundError(f"{resource_type.label} not found")

    current_status = record.status
    if status is not None and status != current_status:
        try:
            validate_transition(
                resource_type.transitions,
                from_status=current_status,
                to_status=status,
            )
        except IllegalTransitionError:
            logger.warning(
                "Rejected status transition",
                extra={**log_context, "from_status": current_status, "to_status": status},
            )
            raise

    write_set = _build_write_set(
        resource_type=resource_type,
        record=record,
        status=status,
        fields=fields,
        now=now or timezone.now(),
    )

    try:
        updated = record_store.update(record=record, fields=write_set)
    except StorageError:
        logger.exception(
            "Record update failed",
            extra={**log_context, "fields": sorted(write_set)},
        )
        raise

    if status is not None and status != current_status:
        logger.info(
            "Status transition applied",
            extra={**log_context, "from_status": current_status, "to_status": status},
        )

    return updated
