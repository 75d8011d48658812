from datetime import datetime, timedelta, timezone

import pytest

import config
from context import GymContext
from db import Storage


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    # Minimum bcrypt cost keeps the seeded accounts quick to hash.
    monkeypatch.setattr(config, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def db_file(tmp_path):
    return tmp_path / "gym.db"


@pytest.fixture
def storage(db_file):
    return Storage(db_file)


@pytest.fixture
def ctx(storage):
    return GymContext(storage=storage)


def utc_today_plus(days: int) -> str:
    return (datetime.now(timezone.utc).date() + timedelta(days=days)).isoformat()
