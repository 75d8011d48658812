"""
db.py
SQLite-backed snapshot storage: one JSON document per store, keyed by store name.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import config

logger = logging.getLogger(__name__)


class Storage:
    """Local persistent storage for store snapshots."""

    def __init__(self, db_file: str | Path | None = None):
        self.db_file = Path(db_file or config.DB_FILE)
        self._create_tables()

    @contextmanager
    def get_conn(self):
        conn = sqlite3.connect(self.db_file, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def execute(self, sql: str, params: tuple = ()) -> int:
        with self.get_conn() as conn:
            cur = conn.execute(sql, params)
            return cur.lastrowid

    def fetch_one(self, sql: str, params: tuple = ()):
        with self.get_conn() as conn:
            cur = conn.execute(sql, params)
            return cur.fetchone()

    def fetch_all(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        with self.get_conn() as conn:
            cur = conn.execute(sql, params)
            return cur.fetchall()

    def _create_tables(self) -> None:
        try:
            self.execute(
                """
                CREATE TABLE IF NOT EXISTS store_snapshots (
                    name TEXT PRIMARY KEY,
                    data TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
                """
            )
        except sqlite3.Error:
            logger.exception("Could not prepare snapshot table in %s", self.db_file)

    def load(self, name: str) -> dict[str, Any] | None:
        """
        Return the stored snapshot for a store, or None when there is none.
        Read failures are logged and reported as "no snapshot" so the caller
        falls back to its defaults.
        """
        try:
            row = self.fetch_one("SELECT data FROM store_snapshots WHERE name = ?", (name,))
        except sqlite3.Error as e:
            logger.warning("Could not read snapshot %r: %s", name, e)
            return None
        if not row:
            return None
        try:
            data = json.loads(row["data"])
        except ValueError as e:
            logger.warning("Discarding corrupt snapshot %r: %s", name, e)
            return None
        if not isinstance(data, dict):
            logger.warning("Discarding snapshot %r: expected an object, got %s", name, type(data).__name__)
            return None
        return data

    def save(self, name: str, data: dict[str, Any]) -> bool:
        """Write a snapshot. Failures are logged; the in-memory state stays authoritative."""
        now = datetime.now(timezone.utc).isoformat(timespec="seconds")
        try:
            self.execute(
                """
                INSERT INTO store_snapshots(name, data, updated_at) VALUES(?, ?, ?)
                ON CONFLICT(name) DO UPDATE SET data=excluded.data, updated_at=excluded.updated_at
                """,
                (name, json.dumps(data), now),
            )
        except (sqlite3.Error, TypeError, ValueError):
            logger.exception("Could not persist snapshot %r", name)
            return False
        return True

    def clear(self, name: str | None = None) -> None:
        if name is None:
            self.execute("DELETE FROM store_snapshots")
        else:
            self.execute("DELETE FROM store_snapshots WHERE name = ?", (name,))


class BaseStore:
    """
    Common plumbing for a domain store: owns one or more record collections,
    restores them from storage on construction and writes them back after
    every mutation.
    """

    name: str = ""

    def __init__(self, storage: Storage):
        self.storage = storage
        self.initialized = False
        snapshot = storage.load(self.name)
        if snapshot is not None:
            try:
                self.restore(snapshot)
                self.initialized = bool(snapshot.get("initialized", False))
                logger.debug("Loaded %s snapshot", self.name)
            except (TypeError, KeyError, ValueError) as e:
                logger.warning("Snapshot %r does not fit the current records, using defaults: %s", self.name, e)
                self.reset()
        self.init()

    def init(self) -> None:
        """Hook run after loading; stores seed or repair their collections here."""

    def reset(self) -> None:
        raise NotImplementedError

    def restore(self, snapshot: dict[str, Any]) -> None:
        raise NotImplementedError

    def snapshot(self) -> dict[str, Any]:
        raise NotImplementedError

    def save(self) -> None:
        data = self.snapshot()
        data["initialized"] = self.initialized
        self.storage.save(self.name, data)


def find_index(items: list, record_id: str) -> int:
    for i, item in enumerate(items):
        if item.id == record_id:
            return i
    return -1
