import pytest

from models import CLASS_CATEGORIES
from schedules import ClassScheduleStore


def test_default_catalog(storage):
    store = ClassScheduleStore(storage)
    assert len(store.gym_classes) == 11
    grouped = store.classes_by_category
    assert list(grouped) == list(CLASS_CATEGORIES)
    assert sum(len(v) for v in grouped.values()) == 11
    assert store.schedules == []


def test_delete_class_cascades_to_its_schedules(storage):
    store = ClassScheduleStore(storage)
    yoga_a = store.add_schedule("cls-yoga", "monday", "07:00", "08:00", 20, "Studio 1")
    yoga_b = store.add_schedule("cls-yoga", "wednesday", "18:00", "19:00", 20, "Studio 1")
    zumba = store.add_schedule("cls-zumba", "monday", "09:00", "10:00", 25, "Studio 2")

    store.delete_class("cls-yoga")

    assert store.get_class_by_id("cls-yoga") is None
    assert store.get_schedule_by_id(yoga_a.id) is None
    assert store.get_schedule_by_id(yoga_b.id) is None
    assert store.schedules == [zumba]
    assert len(store.gym_classes) == 10


def test_schedules_by_day_sorted_and_active_only(storage):
    store = ClassScheduleStore(storage)
    late = store.add_schedule("cls-yoga", "friday", "18:30", "19:30", 20, "Studio 1")
    early = store.add_schedule("cls-zumba", "friday", "06:00", "07:00", 20, "Studio 2")
    mid = store.add_schedule("cls-trx", "friday", "12:00", "13:00", 12, "Area TRX")
    hidden = store.add_schedule("cls-crossfit", "friday", "10:00", "11:00", 10, "Box")
    store.add_schedule("cls-yoga", "saturday", "08:00", "09:00", 20, "Studio 1")
    store.update_schedule(hidden.id, is_active=False)

    assert [s.id for s in store.get_schedules_by_day("friday")] == [early.id, mid.id, late.id]
    assert store.get_schedules_by_class("cls-crossfit") == []
    assert store.get_schedules_by_day("sunday") == []


def test_update_schedule_refreshes_timestamp(storage):
    store = ClassScheduleStore(storage)
    s = store.add_schedule("cls-yoga", "monday", "07:00", "08:00", 20, "Studio 1")
    store.update_schedule(s.id, room="Studio 3")
    updated = store.get_schedule_by_id(s.id)
    assert updated.room == "Studio 3"
    assert updated.updated_at >= s.updated_at
    store.update_schedule("missing", room="x")


def test_invalid_schedule_input(storage):
    store = ClassScheduleStore(storage)
    with pytest.raises(ValueError):
        store.add_schedule("cls-yoga", "funday", "07:00", "08:00", 20, "Studio 1")
    with pytest.raises(ValueError):
        store.add_schedule("cls-yoga", "monday", "7:00", "08:00", 20, "Studio 1")
    with pytest.raises(ValueError):
        store.add_schedule("cls-yoga", "monday", "09:00", "08:00", 20, "Studio 1")
    with pytest.raises(ValueError):
        store.add_class("Boxing", "combat")


def test_class_crud(storage):
    store = ClassScheduleStore(storage)
    boxing = store.add_class("Boxing", "functional")
    assert boxing in store.classes_by_category["functional"]
    store.update_class(boxing.id, is_active=False)
    assert boxing.id not in {c.id for c in store.active_classes}


def test_empty_catalog_is_reseeded_on_load(storage):
    store = ClassScheduleStore(storage)
    for c in list(store.gym_classes):
        store.delete_class(c.id)
    assert store.gym_classes == []

    reloaded = ClassScheduleStore(storage)
    assert len(reloaded.gym_classes) == 11


def test_custom_catalog_kept_on_reload(storage):
    store = ClassScheduleStore(storage)
    boxing = store.add_class("Boxing", "functional")
    store.delete_class("cls-zumba")
    reloaded = ClassScheduleStore(storage)
    assert reloaded.get_class_by_id(boxing.id) == boxing
    assert reloaded.get_class_by_id("cls-zumba") is None
