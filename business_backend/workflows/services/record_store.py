# workflows/services/record_store.py

"""
RECORD STORE (PERSISTENCE COLLABORATOR)

Contract used by the transition orchestrator:
- get(record_id=..., store_id=...) -> record | None
- update(record=..., fields={...}) -> updated record

The Django implementation loads with SELECT ... FOR UPDATE so that,
inside the orchestrator's transaction, concurrent transitions on the
same row are serialized (on backends that support row locks).
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from django.core.exceptions import FieldDoesNotExist, ValidationError
from django.db import DatabaseError

from workflows.services.exceptions import StorageError


class RecordStore(Protocol):
    def get(self, *, record_id, store_id) -> Any | None: ...

    def update(self, *, record, fields: Mapping[str, Any]) -> Any: ...


class DjangoRecordStore:
    def __init__(self, model):
        self.model = model

    def get(self, *, record_id, store_id):
        try:
            return (
                self.model.objects.select_for_update()
                .filter(pk=record_id, store_id=store_id)
                .first()
            )
        except (ValidationError, ValueError):
            # malformed primary key: nothing can match it
            return None
        except DatabaseError as exc:
            raise StorageError(str(exc)) from exc

    def update(self, *, record, fields: Mapping[str, Any]):
        try:
            updated = self.model.objects.filter(
                pk=record.pk,
                store_id=record.store_id,
            ).update(**fields)
        except (FieldDoesNotExist, ValidationError) as exc:
            raise StorageError(str(exc)) from exc
        except DatabaseError as exc:
            raise StorageError(str(exc)) from exc

        if not updated:
            raise StorageError(
                f"{self.model.__name__} {record.pk} was removed before the update was applied."
            )

        try:
            return self.model.objects.get(pk=record.pk)
        except DatabaseError as exc:
            raise StorageError(str(exc)) from exc
