import json

from core.database import MonthRecordStore, reconcile_mental_state, reconcile_record
from core.models import MentalStateEntry
from core.month_key import key_for
from core.storage import MemoryStore

from tests.conftest import make_habit, make_record

def test_save_then_load_returns_equal_record(records, sample_record):
    records.save(2024, 1, sample_record)

    assert records.load(2024, 1) == sample_record
    assert records.exists(2024, 1)
    assert not records.exists(2024, 2)

def test_save_writes_record_unchanged(memory_store, records, sample_record):
    records.save(2024, 1, sample_record)

    stored = json.loads(memory_store.get(key_for(2024, 1)))
    assert stored["lastUpdated"] == 123

def test_load_missing_month_returns_none(records):
    assert records.load(2024, 1) is None
    assert records.get_stats()["missing_count"] == 1

def test_load_pads_short_checks_to_month_length(memory_store):
    short = make_record(28, [make_habit("a", 28, checked={0, 27})])
    memory_store.set(key_for(2024, 0), short.to_json())

    record = MonthRecordStore(memory_store).load(2024, 0)

    checks = record.habits[0].checks
    assert len(checks) == 31
    assert checks[0] and checks[27]
    assert not any(checks[28:])
    assert [e.day for e in record.mental_state] == list(range(1, 32))

def test_load_truncates_long_checks(memory_store):
    long = make_record(31, [make_habit("a", 31, checked={0, 30})])
    memory_store.set(key_for(2023, 1), long.to_json())

    record = MonthRecordStore(memory_store).load(2023, 1)

    assert len(record.habits[0].checks) == 28
    assert record.habits[0].checks[0]
    assert len(record.mental_state) == 28

def test_load_counts_reconciliation(memory_store):
    memory_store.set(key_for(2024, 0), make_record(28, [make_habit("a", 28)]).to_json())
    records = MonthRecordStore(memory_store)

    records.load(2024, 0)

    assert records.get_stats()["reconciled_count"] == 1

def test_malformed_record_treated_as_absent():
    store = MemoryStore({key_for(2024, 1): "{broken"})
    records = MonthRecordStore(store)

    assert records.load(2024, 1) is None
    assert records.get_stats()["malformed_count"] == 1

def test_record_missing_required_field_treated_as_absent():
    raw = json.dumps({"habits": [{"name": "no id", "checks": []}], "mentalState": []})
    records = MonthRecordStore(MemoryStore({key_for(2024, 1): raw}))

    assert records.load(2024, 1) is None

def test_reconcile_mental_state_rebuilds_days():
    entries = (
        MentalStateEntry(day=2, mood=5, motivation=6),
        MentalStateEntry(day=2, mood=9, motivation=9),
        MentalStateEntry(day=40, mood=1, motivation=1),
    )

    result = reconcile_mental_state(entries, 3)

    assert result == (
        MentalStateEntry(day=1),
        MentalStateEntry(day=2, mood=5, motivation=6),
        MentalStateEntry(day=3),
    )

def test_reconcile_record_returns_same_object_when_consistent(sample_record):
    assert reconcile_record(sample_record, 29) is sample_record

def test_reconcile_never_drops_habits(sample_record):
    reconciled = reconcile_record(sample_record, 31)
    assert reconciled.habit_ids == ["a", "b", "c"]

def test_list_months_sorted_and_ignores_foreign_keys(memory_store, records, sample_record):
    records.save(2024, 1, sample_record)
    records.save(2023, 11, sample_record)
    memory_store.set("unrelated", "value")

    assert records.list_months() == [(2023, 11), (2024, 1)]

def test_deeply_nested_record_treated_as_absent():
    raw = "[" * 100000 + "]" * 100000
    records = MonthRecordStore(MemoryStore({key_for(2024, 1): raw}))

    assert records.load(2024, 1) is None
    assert records.get_stats()["malformed_count"] == 1
