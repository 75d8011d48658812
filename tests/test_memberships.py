from datetime import datetime, timezone

from conftest import utc_today_plus
from memberships import MembershipStore
from packages import PackageStore


def _add(store, member_id, end_offset, status="active"):
    return store.add_membership(member_id, "pkg-001", utc_today_plus(-30), utc_today_plus(end_offset), status=status)


def test_first_load_seeds_memberships(storage):
    store = MembershipStore(storage)
    assert store.initialized
    assert store.get_membership_by_id("ms-001") is not None


def test_status_views(storage):
    store = MembershipStore(storage)
    assert all(m.status == "active" for m in store.active_memberships)
    assert [m.id for m in store.expired_memberships] == ["ms-003"]


def test_expiring_window_boundaries(storage):
    store = MembershipStore(storage)
    today = _add(store, "m-today", 0)
    week = _add(store, "m-week", 7)
    eight = _add(store, "m-eight", 8)
    past = _add(store, "m-past", -1)
    frozen = _add(store, "m-frozen", 3, status="frozen")

    ids = {m.id for m in store.expiring_memberships}
    assert today.id in ids
    assert week.id in ids
    assert eight.id not in ids
    assert past.id not in ids
    assert frozen.id not in ids


def test_get_expiring_with_explicit_clock(storage):
    store = MembershipStore(storage)
    m = store.add_membership("m1", "pkg-001", "2026-01-01", "2026-02-10")
    now = datetime(2026, 2, 1, 8, 0, tzinfo=timezone.utc)
    assert m in store.get_expiring(now=now, window_days=10)
    assert m not in store.get_expiring(now=now, window_days=5)


def test_active_lookup_ignores_dates(storage):
    store = MembershipStore(storage)
    stale = _add(store, "m-stale", -40)
    _add(store, "m-stale", 60)
    # first status=active record wins even though it already ended
    assert store.get_active_membership_by_member("m-stale") == stale
    assert stale not in store.expiring_memberships
    assert store.get_active_membership_by_member("nobody") is None


def test_update_status_and_delete(storage):
    store = MembershipStore(storage)
    m = _add(store, "m1", 20)
    store.update_status(m.id, "frozen")
    assert store.get_membership_by_id(m.id).status == "frozen"
    assert store.get_memberships_by_member("m1")[0].status == "frozen"
    store.delete_membership(m.id)
    assert store.get_membership_by_id(m.id) is None


def test_invalid_status_rejected(storage):
    store = MembershipStore(storage)
    m = _add(store, "m1", 20)
    try:
        store.update_status(m.id, "paused")
    except ValueError:
        pass
    else:
        raise AssertionError("expected ValueError")
    assert store.get_membership_by_id(m.id).status == "active"


def test_unknown_id_updates_are_silent(storage):
    store = MembershipStore(storage)
    before = list(store.memberships)
    store.update_membership("missing", notes="x")
    store.delete_membership("missing")
    assert store.memberships == before


def test_memberships_survive_reload(storage):
    store = MembershipStore(storage)
    m = _add(store, "m1", 20)
    store.delete_membership("ms-001")
    reloaded = MembershipStore(storage)
    assert reloaded.get_membership_by_id(m.id) == m
    # not re-seeded on the second load
    assert reloaded.get_membership_by_id("ms-001") is None


def test_packages_crud(storage):
    store = PackageStore(storage)
    seeded = len(store.packages)
    assert all(p.is_active for p in store.active_packages)
    assert len(store.active_packages) == seeded - 1

    pkg = store.add_package("Pelajar", 30, 250000, features=["Akses gym"])
    assert store.get_package_by_id(pkg.id).features == ["Akses gym"]
    store.update_package(pkg.id, is_active=False)
    assert pkg.id not in {p.id for p in store.active_packages}
    store.delete_package(pkg.id)
    assert store.get_package_by_id(pkg.id) is None
    assert len(PackageStore(storage).packages) == seeded


def test_deleting_package_leaves_memberships(storage):
    packages = PackageStore(storage)
    memberships = MembershipStore(storage)
    packages.delete_package("pkg-002")
    assert memberships.get_membership_by_id("ms-001").package_id == "pkg-002"
