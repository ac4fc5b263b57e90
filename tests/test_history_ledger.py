"""
Tests for HistoryLedger

Tests cover:
- Bounded, most-recent-first appends
- Millisecond ids and collision handling
- Remove / clear semantics
- Loading corrupt or partially invalid history
"""

import json
from datetime import datetime, timedelta, timezone

from php_blueprint.core.config import HISTORY_NAMESPACE
from php_blueprint.models.spec import default_spec
from php_blueprint.services.history_ledger import HistoryLedger, to_iso_millis
from php_blueprint.storage.record_store import InMemoryRecordStore

from conftest import FailingWriteStore, StepClock


def _spec(name: str):
    return default_spec().model_copy(update={"project_name": name})


class TestIsoMillis:
    """Tests for record id formatting."""

    def test_utc_with_millis(self):
        instant = datetime(2025, 1, 31, 9, 15, 2, 123456, tzinfo=timezone.utc)

        assert to_iso_millis(instant) == "2025-01-31T09:15:02.123Z"

    def test_offset_converted_to_utc(self):
        instant = datetime(2025, 1, 31, 11, 0, 0, tzinfo=timezone(timedelta(hours=2)))

        assert to_iso_millis(instant) == "2025-01-31T09:00:00.000Z"

    def test_naive_treated_as_utc(self):
        assert to_iso_millis(datetime(2025, 1, 1)) == "2025-01-01T00:00:00.000Z"


class TestAppend:
    """Tests for recording generations."""

    def test_append_prepends_and_persists(self, store, clock):
        ledger = HistoryLedger(store, clock=clock)

        first = ledger.append(_spec("One"), "plan one")
        second = ledger.append(_spec("Two"), "plan two")

        assert [r.id for r in ledger.records] == [second.id, first.id]
        persisted = json.loads(store.records[HISTORY_NAMESPACE])
        assert [entry["id"] for entry in persisted] == [second.id, first.id]
        assert persisted[0]["spec"]["projectName"] == "Two"

    def test_timestamp_equals_id(self, store, clock):
        record = HistoryLedger(store, clock=clock).append(_spec("A"), "plan")

        assert record.timestamp == record.id == "2025-01-01T12:00:00.000Z"

    def test_bounded_to_max_entries(self, store, clock):
        """51 appends keep exactly the 50 most recent."""
        ledger = HistoryLedger(store, clock=clock)

        records = [ledger.append(_spec(f"P{i}"), f"plan {i}") for i in range(51)]

        assert len(ledger) == 50
        assert ledger.records[0].id == records[-1].id
        assert records[0].id not in {r.id for r in ledger}
        assert len(json.loads(store.records[HISTORY_NAMESPACE])) == 50

    def test_custom_bound(self, store, clock):
        ledger = HistoryLedger(store, max_entries=2, clock=clock)
        for i in range(3):
            ledger.append(_spec(f"P{i}"), "plan")

        assert [r.spec.project_name for r in ledger] == ["P2", "P1"]

    def test_same_millisecond_ids_are_bumped(self, store):
        frozen = StepClock(step=timedelta(0))
        ledger = HistoryLedger(store, clock=frozen)

        first = ledger.append(_spec("A"), "plan")
        second = ledger.append(_spec("B"), "plan")
        third = ledger.append(_spec("C"), "plan")

        assert first.id == "2025-01-01T12:00:00.000Z"
        assert second.id == "2025-01-01T12:00:00.001Z"
        assert third.id == "2025-01-01T12:00:00.002Z"

    def test_stored_spec_is_a_snapshot(self, store, clock):
        spec = _spec("Snap")
        ledger = HistoryLedger(store, clock=clock)

        record = ledger.append(spec, "plan")
        spec.core_features.append("Added later")

        assert "Added later" not in record.spec.core_features

    def test_write_failure_keeps_entry_in_memory(self, clock):
        failing = FailingWriteStore()
        ledger = HistoryLedger(failing, clock=clock)

        record = ledger.append(_spec("A"), "plan")

        assert ledger.get(record.id) is not None
        assert failing.write_attempts == 1


class TestRemoveAndClear:
    """Tests for deleting history."""

    def test_remove_existing(self, store, clock):
        ledger = HistoryLedger(store, clock=clock)
        keep = ledger.append(_spec("Keep"), "plan")
        drop = ledger.append(_spec("Drop"), "plan")

        ledger.remove(drop.id)

        assert [r.id for r in ledger] == [keep.id]
        assert len(json.loads(store.records[HISTORY_NAMESPACE])) == 1

    def test_remove_unknown_is_noop(self, store, clock):
        ledger = HistoryLedger(store, clock=clock)
        ledger.append(_spec("A"), "plan")
        before = store.records[HISTORY_NAMESPACE]

        ledger.remove("1999-01-01T00:00:00.000Z")

        assert len(ledger) == 1
        assert store.records[HISTORY_NAMESPACE] == before

    def test_clear_refused_by_default(self, store, clock):
        ledger = HistoryLedger(store, clock=clock)
        ledger.append(_spec("A"), "plan")

        assert ledger.clear() is False
        assert len(ledger) == 1

    def test_clear_with_confirmation(self, store, clock):
        ledger = HistoryLedger(store, clock=clock)
        ledger.append(_spec("A"), "plan")

        assert ledger.clear(confirm=lambda: True) is True
        assert len(ledger) == 0
        assert json.loads(store.records[HISTORY_NAMESPACE]) == []

    def test_constructor_confirmation_used(self, store, clock):
        ledger = HistoryLedger(store, clock=clock, confirm=lambda: True)
        ledger.append(_spec("A"), "plan")

        assert ledger.clear() is True


class TestLoad:
    """Tests for reading persisted history."""

    def test_reload_preserves_order(self, store, clock):
        ledger = HistoryLedger(store, clock=clock)
        ids = [ledger.append(_spec(f"P{i}"), "plan").id for i in range(3)]

        reloaded = HistoryLedger(store)

        assert [r.id for r in reloaded] == list(reversed(ids))
        assert reloaded.get(ids[0]).spec.project_name == "P0"

    def test_corrupt_json_loads_empty(self):
        store = InMemoryRecordStore({HISTORY_NAMESPACE: "[{broken"})

        assert len(HistoryLedger(store)) == 0

    def test_non_list_loads_empty(self):
        store = InMemoryRecordStore({HISTORY_NAMESPACE: json.dumps({"id": "x"})})

        assert HistoryLedger(store).records == []

    def test_invalid_entries_skipped(self, store, clock):
        ledger = HistoryLedger(store, clock=clock)
        good = ledger.append(_spec("Good"), "plan")
        payload = json.loads(store.records[HISTORY_NAMESPACE])
        payload.append({"id": "bad", "plan": "no spec here"})
        store.records[HISTORY_NAMESPACE] = json.dumps(payload)

        reloaded = HistoryLedger(store)

        assert [r.id for r in reloaded] == [good.id]

    def test_get_unknown_returns_none(self, store):
        assert HistoryLedger(store).get("nope") is None
