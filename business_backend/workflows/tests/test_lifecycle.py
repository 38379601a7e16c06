# workflows/tests/test_lifecycle.py

from datetime import datetime, timedelta, timezone as dt_timezone
from types import SimpleNamespace

from django.test import SimpleTestCase

from workflows.resource_types import ADMISSION, COMPLAINT, DEAL, RESERVATION
from workflows.services.lifecycle import stamps_for

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=dt_timezone.utc)
EARLIER = NOW - timedelta(days=10)


class FirstEntryStampTests(SimpleTestCase):
    def test_stamps_when_unset(self):
        record = SimpleNamespace(status="lead", viewing_date=None)

        stamps = stamps_for(DEAL, "viewing", record, now=NOW)

        self.assertEqual(stamps, {"viewing_date": NOW})

    def test_existing_value_is_preserved(self):
        record = SimpleNamespace(status="viewing", offer_date=EARLIER)

        stamps = stamps_for(DEAL, "offer", record, now=NOW)

        self.assertEqual(stamps, {})

    def test_caller_value_wins(self):
        record = SimpleNamespace(status="admitted", discharge_at=None)

        stamps = stamps_for(
            ADMISSION,
            "discharged",
            record,
            fields={"discharge_at": EARLIER},
            now=NOW,
        )

        self.assertEqual(stamps, {})

    def test_stamp_overrides_caller_value_for_deals(self):
        record = SimpleNamespace(status="lead", viewing_date=None)

        stamps = stamps_for(
            DEAL,
            "viewing",
            record,
            fields={"viewing_date": EARLIER},
            now=NOW,
        )

        self.assertEqual(stamps, {"viewing_date": NOW})

    def test_missing_attribute_counts_as_unset(self):
        stamps = stamps_for(RESERVATION, "checked_in", SimpleNamespace(), now=NOW)

        self.assertEqual(stamps, {"actual_check_in": NOW})


class EntryStampTests(SimpleTestCase):
    def test_always_overwrites(self):
        record = SimpleNamespace(status="contract", closed_date=EARLIER)

        stamps = stamps_for(DEAL, "closed", record, now=NOW)

        self.assertEqual(stamps, {"closed_date": NOW})

    def test_caller_value_is_overwritten(self):
        record = SimpleNamespace(status="resolved", closed_at=None)

        stamps = stamps_for(
            COMPLAINT,
            "closed",
            record,
            fields={"closed_at": EARLIER},
            now=NOW,
        )

        self.assertEqual(stamps, {"closed_at": NOW})

    def test_status_without_stamp(self):
        record = SimpleNamespace(status="lead")

        self.assertEqual(stamps_for(DEAL, "lost", record, now=NOW), {})

    def test_defaults_to_current_time(self):
        before = datetime.now(dt_timezone.utc)
        stamps = stamps_for(DEAL, "withdrawn", SimpleNamespace(status="contract"))
        after = datetime.now(dt_timezone.utc)

        self.assertTrue(before <= stamps["withdrawn_date"] <= after)
