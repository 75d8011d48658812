"""
checkins.py
Member gym visits: one check-in per member per calendar day (UTC).
"""

from __future__ import annotations

import dataclasses

from db import BaseStore, find_index
from models import CheckIn, Result
from utils import generate_id, now_iso, today_iso


class CheckInStore(BaseStore):
    name = "checkins"

    def __init__(self, storage):
        self.checkins: list[CheckIn] = []
        super().__init__(storage)

    def reset(self) -> None:
        self.checkins = []

    def restore(self, snapshot: dict) -> None:
        self.checkins = [CheckIn.from_dict(c) for c in snapshot.get("checkins", [])]

    def snapshot(self) -> dict:
        return {"checkins": [c.to_dict() for c in self.checkins]}

    @property
    def today_checkins(self) -> list[CheckIn]:
        return self.get_checkins_by_date(today_iso())

    @property
    def active_checkins(self) -> list[CheckIn]:
        """Today's visits that have not checked out yet."""
        return [c for c in self.today_checkins if c.is_open]

    def get_checkins_by_date(self, date: str) -> list[CheckIn]:
        return [c for c in self.checkins if c.check_in_time[:10] == date]

    def get_checkins_by_member(self, member_id: str) -> list[CheckIn]:
        return [c for c in self.checkins if c.member_id == member_id]

    def is_checked_in_today(self, member_id: str) -> bool:
        return any(c.member_id == member_id for c in self.active_checkins)

    def check_in(self, member_id: str, member_name: str, notes: str = "") -> Result:
        """
        Record a visit. Refused when the member already has a visit today,
        whether or not that visit has checked out.
        """
        earlier = next((c for c in self.today_checkins if c.member_id == member_id), None)
        if earlier is not None:
            if earlier.is_open:
                message = f"{member_name} is already checked in today."
            else:
                message = f"{member_name} already visited today."
            return Result(False, message, code="already_checked_in", value=earlier)

        checkin = CheckIn(
            id=generate_id(),
            member_id=member_id,
            member_name=member_name,
            check_in_time=now_iso(),
            notes=notes,
        )
        self.checkins.insert(0, checkin)
        self.save()
        return Result(True, f"{member_name} checked in.", value=checkin)

    def check_out(self, checkin_id: str) -> None:
        idx = find_index(self.checkins, checkin_id)
        if idx != -1:
            self.checkins[idx] = dataclasses.replace(self.checkins[idx], check_out_time=now_iso())
            self.save()
