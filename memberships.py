"""
memberships.py
Memberships store: which member holds which package, and for how long.
"""

from __future__ import annotations

import logging
from datetime import datetime

import config
import seed
from db import BaseStore, find_index
from models import MEMBERSHIP_STATUSES, Membership, check_choice
from utils import days_remaining, generate_id, now_iso

logger = logging.getLogger(__name__)


class MembershipStore(BaseStore):
    name = "memberships"

    def __init__(self, storage):
        self.memberships: list[Membership] = []
        super().__init__(storage)

    def reset(self) -> None:
        self.memberships = []

    def restore(self, snapshot: dict) -> None:
        self.memberships = [Membership.from_dict(m) for m in snapshot.get("memberships", [])]

    def snapshot(self) -> dict:
        return {"memberships": [m.to_dict() for m in self.memberships]}

    def init(self) -> None:
        if not self.initialized:
            self.memberships = [Membership.from_dict(m) for m in seed.SEED_MEMBERSHIPS]
            self.initialized = True
            logger.info("Seeded %d memberships", len(self.memberships))
            self.save()

    # ---------- views ----------

    @property
    def active_memberships(self) -> list[Membership]:
        return [m for m in self.memberships if m.status == "active"]

    @property
    def expired_memberships(self) -> list[Membership]:
        return [m for m in self.memberships if m.status == "expired"]

    @property
    def expiring_memberships(self) -> list[Membership]:
        return self.get_expiring()

    def get_expiring(
        self, now: datetime | None = None, window_days: int = config.EXPIRING_WINDOW_DAYS
    ) -> list[Membership]:
        """Active memberships ending between today and `window_days` days from now, inclusive."""
        return [m for m in self.active_memberships if 0 <= days_remaining(m.end_date, now) <= window_days]

    def get_membership_by_id(self, membership_id: str) -> Membership | None:
        return next((m for m in self.memberships if m.id == membership_id), None)

    def get_memberships_by_member(self, member_id: str) -> list[Membership]:
        return [m for m in self.memberships if m.member_id == member_id]

    def get_active_membership_by_member(self, member_id: str) -> Membership | None:
        # First record flagged active; end dates are not checked here.
        return next((m for m in self.memberships if m.member_id == member_id and m.status == "active"), None)

    # ---------- mutations ----------

    def add_membership(
        self,
        member_id: str,
        package_id: str,
        start_date: str,
        end_date: str,
        status: str = "active",
        notes: str = "",
        trainer_id: str | None = None,
    ) -> Membership:
        membership = Membership(
            id=generate_id(),
            member_id=member_id,
            package_id=package_id,
            start_date=start_date,
            end_date=end_date,
            status=check_choice(status, MEMBERSHIP_STATUSES, "membership status"),
            created_at=now_iso(),
            notes=notes,
            trainer_id=trainer_id,
        )
        self.memberships.append(membership)
        self.save()
        return membership

    def update_membership(self, membership_id: str, **fields) -> None:
        idx = find_index(self.memberships, membership_id)
        if idx == -1:
            return
        if "status" in fields:
            check_choice(fields["status"], MEMBERSHIP_STATUSES, "membership status")
        self.memberships[idx] = self.memberships[idx].merge(**fields)
        self.save()

    def update_status(self, membership_id: str, status: str) -> None:
        self.update_membership(membership_id, status=status)

    def delete_membership(self, membership_id: str) -> None:
        self.memberships = [m for m in self.memberships if m.id != membership_id]
        self.save()
