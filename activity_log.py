"""
activity_log.py
Append-only audit trail of admin actions, newest first.
"""

from __future__ import annotations

import config
from db import BaseStore
from models import ACTIVITY_ACTIONS, ActivityLog, check_choice
from utils import generate_id, now_iso, today_iso


class ActivityLogStore(BaseStore):
    name = "activityLog"

    def __init__(self, storage, auth):
        self.auth = auth
        self.logs: list[ActivityLog] = []
        super().__init__(storage)

    def reset(self) -> None:
        self.logs = []

    def restore(self, snapshot: dict) -> None:
        self.logs = [ActivityLog.from_dict(entry) for entry in snapshot.get("logs", [])]

    def snapshot(self) -> dict:
        return {"logs": [entry.to_dict() for entry in self.logs]}

    def add_log(
        self,
        action: str,
        target_type: str,
        target_id: str,
        target_name: str,
        details: str = "",
    ) -> ActivityLog:
        """Record an action by whoever is logged in, or by 'System' when nobody is."""
        actor = self.auth.current_user
        entry = ActivityLog(
            id=generate_id(),
            user_id=actor.id if actor else "",
            user_name=actor.name if actor else "System",
            user_role=actor.role if actor else "admin",
            action=check_choice(action, ACTIVITY_ACTIONS, "action"),
            target_type=target_type,
            target_id=target_id,
            target_name=target_name,
            details=details,
            timestamp=now_iso(),
        )
        self.logs.insert(0, entry)
        self.save()
        return entry

    @property
    def recent_logs(self) -> list[ActivityLog]:
        return self.logs[: config.RECENT_LOG_LIMIT]

    @property
    def today_logs(self) -> list[ActivityLog]:
        return self.get_logs_by_date(today_iso())

    def get_logs_by_date(self, date: str) -> list[ActivityLog]:
        return [entry for entry in self.logs if entry.timestamp[:10] == date]

    def get_logs_by_user(self, user_id: str) -> list[ActivityLog]:
        return [entry for entry in self.logs if entry.user_id == user_id]

    def get_logs_by_action(self, action: str) -> list[ActivityLog]:
        return [entry for entry in self.logs if entry.action == action]

    def clear_logs(self) -> None:
        self.logs = []
        self.save()
