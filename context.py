"""
context.py
Builds every store once and wires the cross-store handles.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from activity_log import ActivityLogStore
from auth import AuthGate
from checkins import CheckInStore
from db import Storage
from memberships import MembershipStore
from packages import PackageStore
from payments import PaymentStore
from personal_training import PTStore
from schedules import ClassScheduleStore
from users import UserStore


@dataclass(frozen=True)
class DashboardStats:
    total_members: int
    active_members: int
    total_staff: int
    total_trainers: int
    monthly_revenue: float
    pending_payments: int
    expiring_memberships: int
    new_members_this_month: int


class GymContext:
    """
    One application context: storage, all domain stores and the session's
    auth gate. Pages receive this object instead of reaching for globals.
    """

    def __init__(self, storage: Storage | None = None, db_file: str | Path | None = None):
        self.storage = storage or Storage(db_file)
        self.users = UserStore(self.storage)
        self.auth = AuthGate(self.users)
        self.packages = PackageStore(self.storage)
        self.memberships = MembershipStore(self.storage)
        self.payments = PaymentStore(self.storage)
        self.pt = PTStore(self.storage)
        self.classes = ClassScheduleStore(self.storage)
        self.checkins = CheckInStore(self.storage)
        self.activity = ActivityLogStore(self.storage, self.auth)

    def dashboard_stats(self) -> DashboardStats:
        month = datetime.now(timezone.utc).strftime("%Y-%m")
        members = self.users.members
        return DashboardStats(
            total_members=len(members),
            active_members=len(self.users.active_members),
            total_staff=len(self.users.staff),
            total_trainers=len(self.users.trainers),
            monthly_revenue=self.payments.monthly_revenue,
            pending_payments=len(self.payments.pending_payments),
            expiring_memberships=len(self.memberships.expiring_memberships),
            new_members_this_month=sum(1 for m in members if m.created_at[:7] == month),
        )
