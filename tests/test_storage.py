import logging

from db import Storage
from packages import PackageStore
from users import UserStore


def test_missing_snapshot_is_none(storage):
    assert storage.load("nothing") is None


def test_save_and_load_round_trip(storage):
    assert storage.save("demo", {"initialized": True, "items": [1, 2]})
    assert storage.load("demo") == {"initialized": True, "items": [1, 2]}
    assert Storage(storage.db_file).load("demo") == {"initialized": True, "items": [1, 2]}


def test_every_store_writes_its_own_snapshot(ctx, storage):
    names = {row["name"] for row in storage.fetch_all("SELECT name FROM store_snapshots")}
    assert {"users", "packages", "memberships", "payments", "pt", "classSchedules"} <= names


def test_corrupt_snapshot_falls_back_to_seed(storage, caplog):
    storage.execute(
        "INSERT INTO store_snapshots(name, data, updated_at) VALUES(?, ?, ?)",
        ("packages", "{not json", "2026-01-01"),
    )
    with caplog.at_level(logging.WARNING):
        store = PackageStore(storage)
    assert store.get_package_by_id("pkg-001") is not None
    assert "corrupt" in caplog.text


def test_mismatched_snapshot_falls_back_to_seed(storage):
    storage.save("packages", {"initialized": True, "packages": [{"unexpected": 1}]})
    store = PackageStore(storage)
    assert len(store.packages) == 5


def test_non_object_records_fall_back_to_seed(storage, caplog):
    storage.save("packages", {"initialized": True, "packages": ["oops", 3]})
    with caplog.at_level(logging.WARNING):
        store = PackageStore(storage)
    assert len(store.packages) == 5
    assert "does not fit" in caplog.text


def test_unknown_fields_are_ignored(storage):
    store = PackageStore(storage)
    data = storage.load("packages")
    data["packages"][0]["legacy_field"] = "x"
    storage.save("packages", data)
    assert PackageStore(storage).packages == store.packages


def test_unserialisable_snapshot_is_logged_not_raised(storage, caplog):
    with caplog.at_level(logging.ERROR):
        assert storage.save("bad", {"value": object()}) is False
    assert "Could not persist" in caplog.text
    assert storage.load("bad") is None


def test_unreadable_database_falls_back(tmp_path, caplog):
    broken = tmp_path / "missing-dir" / "gym.db"
    with caplog.at_level(logging.WARNING):
        storage = Storage(broken)
        users = UserStore(storage)
    # nothing could be read or written, the seed data is still served from memory
    assert users.get_user_by_id("u-admin-001") is not None
    assert storage.load("users") is None
