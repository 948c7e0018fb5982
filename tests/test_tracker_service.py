import pytest

from core.month_key import key_for
from core.models import MonthRecord

def stored(memory_store, year, month):
    return MonthRecord.from_json(memory_store.get(key_for(year, month)))

def test_operations_require_open_month(service):
    assert not service.is_open
    with pytest.raises(RuntimeError):
        service.toggle_check("1", 0)

def test_open_new_month_persists_template(service, memory_store, clock):
    record = service.open_month(2024, 1)

    assert len(record.habits) == 10
    assert stored(memory_store, 2024, 1) == record
    assert record.last_updated == clock.last

def test_open_existing_month_does_not_rewrite(service, records, sample_record):
    records.save(2024, 1, sample_record)
    saves = records.get_stats()["save_count"]

    record = service.open_month(2024, 1)

    assert record == sample_record
    assert records.get_stats()["save_count"] == saves

def test_toggle_persists_before_returning(service, memory_store, clock):
    service.open_month(2024, 1)

    record = service.toggle_check("1", 3)

    assert record.habits[0].checks[3]
    assert stored(memory_store, 2024, 1) == record
    assert record.last_updated == clock.last

def test_noop_intent_does_not_save(service, records):
    service.open_month(2024, 1)
    saves = records.get_stats()["save_count"]

    service.toggle_check("missing", 0)
    service.move_habit(0, "up")

    assert records.get_stats()["save_count"] == saves

def test_navigation_carries_habits_and_keeps_months_separate(service, memory_store):
    service.open_month(2024, 0)
    service.add_habit()
    service.toggle_check("1", 0)
    service.set_mental_value(0, "mood", 8)
    january = service.record

    february = service.change_month(1)

    assert (service.year, service.month) == (2024, 1)
    assert february.habit_ids == january.habit_ids
    assert not any(c for h in february.habits for c in h.checks)
    assert february.mental_entry(1).mood == 0
    assert len(february.habits[0].checks) == 29

    service.toggle_check("2", 0)
    back = service.change_month(-1)

    assert back == stored(memory_store, 2024, 0)
    assert back.habits[0].checks[0]
    assert not back.habits[1].checks[0]
    assert back.mental_entry(1).mood == 8

def test_change_month_wraps_year(service):
    service.open_month(2024, 0)
    service.change_month(-1)
    assert (service.year, service.month) == (2023, 11)

def test_delete_is_two_phase(service, memory_store):
    service.open_month(2024, 1)

    habit = service.request_delete("3")
    assert habit.id == "3"
    assert service.pending_delete == habit
    assert "3" in stored(memory_store, 2024, 1).habit_ids

    record = service.confirm_delete()

    assert "3" not in record.habit_ids
    assert "3" not in stored(memory_store, 2024, 1).habit_ids
    assert service.pending_delete is None

def test_cancel_delete_keeps_habit(service):
    service.open_month(2024, 1)
    service.request_delete("3")
    service.cancel_delete()

    record = service.confirm_delete()

    assert "3" in record.habit_ids

def test_delete_only_affects_open_month(service, memory_store):
    service.open_month(2024, 0)
    service.change_month(1)
    service.request_delete("1")
    service.confirm_delete()

    assert "1" in stored(memory_store, 2024, 0).habit_ids
    assert "1" not in stored(memory_store, 2024, 1).habit_ids

def test_navigation_discards_pending_delete(service):
    service.open_month(2024, 1)
    service.request_delete("1")
    service.change_month(1)

    assert service.pending_delete is None
    assert "1" in service.confirm_delete().habit_ids

def test_request_delete_unknown_habit(service):
    service.open_month(2024, 1)
    assert service.request_delete("missing") is None
    assert service.pending_delete is None

def test_month_view(service):
    service.open_month(2024, 1)
    service.toggle_check("1", 0)

    view = service.get_month_view()

    assert (view["year"], view["month"], view["monthName"]) == (2024, 1, "February")
    assert view["daysInMonth"] == 29
    assert len(view["days"]) == 29
    assert [len(w["days"]) for w in view["weeks"]] == [7, 7, 7, 8]
    assert len(view["habits"]) == 10
    assert view["dailyStats"][0] == {"day": 1, "done": 1, "notDone": 9, "percent": 10}
    assert view["summary"]["totalActual"] == 1
    assert view["analysis"][0]["actual"] == 1
    assert view["charts"]["dailyProgress"][0] == {"day": 1, "value": 10}
    assert view["pendingDelete"] is None

def test_service_metrics(service):
    assert service.get_service_metrics()["open_month"] is None
    service.open_month(2024, 1)
    metrics = service.get_service_metrics()
    assert metrics["open_month"] == "2024-1"
    assert metrics["habits"] == 10
