from checkins import CheckInStore
from utils import today_iso


def test_check_in_creates_open_visit(storage):
    store = CheckInStore(storage)
    result = store.check_in("m1", "Andi", notes="pagi")
    assert result.success
    visit = result.value
    assert visit.is_open
    assert visit.check_in_time[:10] == today_iso()
    assert store.is_checked_in_today("m1")
    assert store.active_checkins == [visit]


def test_second_check_in_same_day_is_rejected(storage):
    store = CheckInStore(storage)
    store.check_in("m1", "Andi")
    second = store.check_in("m1", "Andi")
    assert not second.success
    assert second.code == "already_checked_in"
    assert len(store.checkins) == 1


def test_check_in_after_check_out_same_day_is_still_rejected(storage):
    store = CheckInStore(storage)
    visit = store.check_in("m1", "Andi").value
    store.check_out(visit.id)

    assert not store.is_checked_in_today("m1")
    again = store.check_in("m1", "Andi")
    assert not again.success
    assert again.code == "already_checked_in"
    assert len(store.get_checkins_by_member("m1")) == 1


def test_other_members_are_independent(storage):
    store = CheckInStore(storage)
    store.check_in("m1", "Andi")
    assert store.check_in("m2", "Putri").success
    assert not store.is_checked_in_today("m3")


def test_newest_first(storage):
    store = CheckInStore(storage)
    first = store.check_in("m1", "Andi").value
    second = store.check_in("m2", "Putri").value
    assert store.checkins == [second, first]
    assert store.today_checkins == [second, first]


def test_earlier_days_do_not_block(storage):
    store = CheckInStore(storage)
    storage.save(
        "checkins",
        {"checkins": [{
            "id": "old", "member_id": "m1", "member_name": "Andi",
            "check_in_time": "2020-01-01T08:00:00+00:00", "notes": "",
        }]},
    )
    reloaded = CheckInStore(storage)
    assert reloaded.is_checked_in_today("m1") is False
    assert reloaded.check_in("m1", "Andi").success
    assert [c.id for c in reloaded.get_checkins_by_date("2020-01-01")] == ["old"]


def test_check_out(storage):
    store = CheckInStore(storage)
    visit = store.check_in("m1", "Andi").value
    store.check_out(visit.id)
    closed = store.checkins[0]
    assert closed.check_out_time is not None
    assert store.active_checkins == []
    assert store.today_checkins == [closed]
    store.check_out("missing")
    assert store.checkins == [closed]


def test_visits_survive_reload(storage):
    store = CheckInStore(storage)
    visit = store.check_in("m1", "Andi").value
    reloaded = CheckInStore(storage)
    assert reloaded.checkins == [visit]
    assert not reloaded.check_in("m1", "Andi").success
