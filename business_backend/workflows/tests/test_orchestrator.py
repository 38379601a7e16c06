# workflows/tests/test_orchestrator.py

import uuid
from datetime import datetime, timedelta, timezone as dt_timezone
from decimal import Decimal
from types import SimpleNamespace

from django.test import TestCase

from deals.models import Deal
from workflows.resource_types import DEAL, RESOURCE_TYPES
from workflows.services.exceptions import (
    IllegalTransitionError,
    NoChangesError,
    RecordNotFoundError,
    StorageError,
)
from workflows.services.record_store import DjangoRecordStore
from workflows.services.transition_orchestrator import apply_update
from workflows.tests.factories import create_store

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=dt_timezone.utc)


class FakeRecordStore:
    """In-memory store that records every call made against it."""

    def __init__(self, record=None, *, fail_on=None):
        self.record = record
        self.fail_on = fail_on
        self.get_calls = 0
        self.update_calls = []

    def get(self, *, record_id, store_id):
        self.get_calls += 1
        if self.fail_on == "get":
            raise StorageError("connection reset by peer")
        if self.record is None:
            return None
        if record_id != self.record.id or store_id != self.record.store_id:
            return None
        return self.record

    def update(self, *, record, fields):
        self.update_calls.append(dict(fields))
        if self.fail_on == "update":
            raise StorageError('duplicate key value violates unique constraint "deal_number"')
        return SimpleNamespace(**{**vars(record), **fields})


def fake_record(status, **attrs):
    return SimpleNamespace(id=uuid.uuid4(), store_id=uuid.uuid4(), status=status, **attrs)


class OrchestratorContractTests(TestCase):
    """
    Behaviour against a fake record store.

    GUARANTEES:
    - Illegal transitions never reach persistence
    - Empty requests never reach storage at all
    - Storage failures propagate unchanged
    """

    def run_update(self, store, record, **kwargs):
        return apply_update(
            resource_type=kwargs.pop("resource_type", DEAL),
            record_store=store,
            record_id=record.id,
            store_id=record.store_id,
            now=NOW,
            **kwargs,
        )

    def test_no_changes_rejected_before_load(self):
        store = FakeRecordStore(fake_record("lead"))

        with self.assertRaises(NoChangesError):
            apply_update(
                resource_type=DEAL,
                record_store=store,
                record_id=store.record.id,
                store_id=store.record.store_id,
            )

        self.assertEqual(store.get_calls, 0)
        self.assertEqual(store.update_calls, [])

    def test_missing_record(self):
        store = FakeRecordStore(None)

        with self.assertRaises(RecordNotFoundError) as ctx:
            apply_update(
                resource_type=DEAL,
                record_store=store,
                record_id=uuid.uuid4(),
                store_id=uuid.uuid4(),
                status="viewing",
            )

        self.assertEqual(str(ctx.exception), "Deal not found")
        self.assertEqual(store.update_calls, [])

    def test_other_store_cannot_see_record(self):
        record = fake_record("lead")
        store = FakeRecordStore(record)

        with self.assertRaises(RecordNotFoundError):
            apply_update(
                resource_type=DEAL,
                record_store=store,
                record_id=record.id,
                store_id=uuid.uuid4(),
                status="viewing",
            )

    def test_illegal_transitions_never_write(self):
        for resource_type in RESOURCE_TYPES.values():
            table = resource_type.transitions
            for source in resource_type.states:
                for target in resource_type.states:
                    if source == target or target in table.get(source, frozenset()):
                        continue
                    store = FakeRecordStore(fake_record(source))
                    with self.subTest(resource_type=resource_type.tag, source=source, target=target):
                        with self.assertRaises(IllegalTransitionError):
                            self.run_update(store, store.record, resource_type=resource_type, status=target)
                        self.assertEqual(store.update_calls, [])

    def test_legal_transitions_write_once(self):
        for resource_type in RESOURCE_TYPES.values():
            for source, targets in resource_type.transitions.items():
                for target in targets:
                    store = FakeRecordStore(fake_record(source))
                    with self.subTest(resource_type=resource_type.tag, source=source, target=target):
                        updated = self.run_update(
                            store, store.record, resource_type=resource_type, status=target
                        )
                        self.assertEqual(len(store.update_calls), 1)
                        self.assertEqual(updated.status, target)

    def test_write_set_carries_fields_status_stamp_and_updated_at(self):
        store = FakeRecordStore(fake_record("lead", viewing_date=None))

        self.run_update(
            store,
            store.record,
            status="viewing",
            fields={"notes": "Second visit booked"},
        )

        self.assertEqual(
            store.update_calls,
            [
                {
                    "notes": "Second visit booked",
                    "status": "viewing",
                    "viewing_date": NOW,
                    "updated_at": NOW,
                }
            ],
        )

    def test_status_inside_fields_is_treated_as_status(self):
        store = FakeRecordStore(fake_record("lead"))

        with self.assertRaises(IllegalTransitionError):
            self.run_update(store, store.record, fields={"status": "closed"})

        self.assertEqual(store.update_calls, [])

    def test_same_status_skips_guard_and_stamps(self):
        store = FakeRecordStore(fake_record("contract", contract_date=None))

        self.run_update(store, store.record, status="contract")

        self.assertEqual(store.update_calls, [{"status": "contract", "updated_at": NOW}])

    def test_field_only_update_skips_guard(self):
        store = FakeRecordStore(fake_record("closed"))

        self.run_update(store, store.record, fields={"notes": "Keys handed over"})

        self.assertEqual(
            store.update_calls,
            [{"notes": "Keys handed over", "updated_at": NOW}],
        )

    def test_closing_adds_commission_split(self):
        record = fake_record(
            "contract",
            asking_price=Decimal("100000000"),
            offer_price=None,
            final_price=None,
            commission_rate=Decimal("5"),
            agent_share_rate=Decimal("50"),
        )
        store = FakeRecordStore(record)

        self.run_update(store, record, status="closed")

        written = store.update_calls[0]
        self.assertEqual(written["final_price"], Decimal("100000000"))
        self.assertEqual(written["commission_amount"], Decimal("5000000"))
        self.assertEqual(written["agent_share_amount"], Decimal("2500000"))
        self.assertEqual(written["company_share_amount"], Decimal("2500000"))
        self.assertEqual(written["closed_date"], NOW)

    def test_closing_without_price_skips_commission(self):
        record = fake_record("contract", asking_price=None, offer_price=None, final_price=None)
        store = FakeRecordStore(record)

        self.run_update(store, record, status="closed")

        self.assertNotIn("commission_amount", store.update_calls[0])
        self.assertEqual(store.update_calls[0]["status"], "closed")

    def test_update_failure_propagates(self):
        store = FakeRecordStore(fake_record("lead"), fail_on="update")

        with self.assertRaises(StorageError) as ctx:
            self.run_update(store, store.record, status="viewing")

        self.assertIn("duplicate key", str(ctx.exception))
        self.assertEqual(len(store.update_calls), 1)

    def test_load_failure_propagates(self):
        store = FakeRecordStore(fake_record("lead"), fail_on="get")

        with self.assertRaises(StorageError):
            self.run_update(store, store.record, status="viewing")

        self.assertEqual(store.update_calls, [])


class OrchestratorDatabaseTests(TestCase):
    """End-to-end against the Deal table through DjangoRecordStore."""

    def setUp(self):
        self.store = create_store(name="Harbour Realty")
        self.record_store = DjangoRecordStore(Deal)

    def update(self, deal, **kwargs):
        return apply_update(
            resource_type=DEAL,
            record_store=self.record_store,
            record_id=deal.id,
            store_id=self.store.id,
            **kwargs,
        )

    def test_full_lifecycle_to_close(self):
        deal = Deal.objects.create(store=self.store, asking_price=Decimal("250000"))

        for target in ("viewing", "offer", "contract"):
            deal = self.update(deal, status=target)

        deal = self.update(deal, status="closed", fields={"final_price": Decimal("240000")})

        self.assertEqual(deal.status, "closed")
        self.assertIsNotNone(deal.viewing_date)
        self.assertIsNotNone(deal.offer_date)
        self.assertIsNotNone(deal.contract_date)
        self.assertIsNotNone(deal.closed_date)
        self.assertEqual(deal.final_price, Decimal("240000"))
        self.assertEqual(deal.commission_amount, Decimal("12000"))
        self.assertEqual(deal.agent_share_amount, Decimal("6000"))
        self.assertEqual(deal.company_share_amount, Decimal("6000"))
        self.assertTrue(deal.commission_is_balanced)

    def test_rejected_transition_leaves_row_untouched(self):
        deal = Deal.objects.create(store=self.store)
        before = Deal.objects.get(pk=deal.pk).updated_at

        with self.assertRaises(IllegalTransitionError):
            self.update(deal, status="contract")

        deal.refresh_from_db()
        self.assertEqual(deal.status, "lead")
        self.assertIsNone(deal.contract_date)
        self.assertEqual(deal.updated_at, before)

    def test_first_entry_stamp_is_not_overwritten(self):
        earlier = NOW - timedelta(days=30)
        deal = Deal.objects.create(store=self.store, status="lead", viewing_date=earlier)

        deal = self.update(deal, status="viewing")

        self.assertEqual(deal.viewing_date, earlier)

    def test_record_in_another_store_is_not_found(self):
        other_store = create_store(name="Rival Realty")
        deal = Deal.objects.create(store=other_store)

        with self.assertRaises(RecordNotFoundError):
            self.update(deal, status="viewing")

        deal.refresh_from_db()
        self.assertEqual(deal.status, "lead")

    def test_malformed_id_is_not_found(self):
        with self.assertRaises(RecordNotFoundError):
            apply_update(
                resource_type=DEAL,
                record_store=self.record_store,
                record_id="not-a-uuid",
                store_id=self.store.id,
                status="viewing",
            )

    def test_unknown_column_is_a_storage_error(self):
        deal = Deal.objects.create(store=self.store)

        with self.assertRaises(StorageError):
            self.update(deal, fields={"no_such_column": 1})

        deal.refresh_from_db()
        self.assertEqual(deal.status, "lead")
