"""
personal_training.py
Personal-trainer session packages and member subscriptions to them.
"""

from __future__ import annotations

import dataclasses

import seed
from db import BaseStore, find_index
from models import PT_STATUSES, PTPackage, PTSubscription, check_choice
from utils import generate_id, now_iso


class PTStore(BaseStore):
    name = "pt"

    def __init__(self, storage):
        self.pt_packages: list[PTPackage] = []
        self.pt_subscriptions: list[PTSubscription] = []
        super().__init__(storage)

    def reset(self) -> None:
        self.pt_packages = []
        self.pt_subscriptions = []

    def restore(self, snapshot: dict) -> None:
        self.pt_packages = [PTPackage.from_dict(p) for p in snapshot.get("pt_packages", [])]
        self.pt_subscriptions = [PTSubscription.from_dict(s) for s in snapshot.get("pt_subscriptions", [])]

    def snapshot(self) -> dict:
        return {
            "pt_packages": [p.to_dict() for p in self.pt_packages],
            "pt_subscriptions": [s.to_dict() for s in self.pt_subscriptions],
        }

    def init(self) -> None:
        if not self.initialized:
            self.pt_packages = [PTPackage.from_dict(p) for p in seed.DEFAULT_PT_PACKAGES]
            self.pt_subscriptions = [PTSubscription.from_dict(s) for s in seed.DEFAULT_PT_SUBSCRIPTIONS]
            self.initialized = True
            self.save()

    # ---------- PT packages ----------

    @property
    def active_pt_packages(self) -> list[PTPackage]:
        return [p for p in self.pt_packages if p.is_active]

    def get_pt_package_by_id(self, package_id: str) -> PTPackage | None:
        return next((p for p in self.pt_packages if p.id == package_id), None)

    def add_pt_package(
        self,
        name: str,
        sessions: int,
        price_per_session: float,
        total_price: float | None = None,
        description: str = "",
        is_active: bool = True,
    ) -> PTPackage:
        if sessions <= 0:
            raise ValueError("A PT package needs at least one session.")
        pkg = PTPackage(
            id=generate_id(),
            name=name,
            sessions=sessions,
            price_per_session=price_per_session,
            total_price=sessions * price_per_session if total_price is None else total_price,
            created_at=now_iso(),
            description=description,
            is_active=is_active,
        )
        self.pt_packages.append(pkg)
        self.save()
        return pkg

    def update_pt_package(self, package_id: str, **fields) -> None:
        idx = find_index(self.pt_packages, package_id)
        if idx != -1:
            self.pt_packages[idx] = self.pt_packages[idx].merge(**fields)
            self.save()

    def delete_pt_package(self, package_id: str) -> None:
        self.pt_packages = [p for p in self.pt_packages if p.id != package_id]
        self.save()

    # ---------- subscriptions ----------

    @property
    def active_subscriptions(self) -> list[PTSubscription]:
        return [s for s in self.pt_subscriptions if s.status == "active"]

    def get_subscription_by_id(self, subscription_id: str) -> PTSubscription | None:
        return next((s for s in self.pt_subscriptions if s.id == subscription_id), None)

    def get_subscriptions_by_member(self, member_id: str) -> list[PTSubscription]:
        return [s for s in self.pt_subscriptions if s.member_id == member_id]

    def get_subscriptions_by_trainer(self, trainer_id: str) -> list[PTSubscription]:
        return [s for s in self.pt_subscriptions if s.trainer_id == trainer_id]

    def get_active_subscription_by_member(self, member_id: str) -> PTSubscription | None:
        # Same rule as memberships: status only, dates are not checked.
        return next(
            (s for s in self.pt_subscriptions if s.member_id == member_id and s.status == "active"), None
        )

    def add_subscription(
        self,
        member_id: str,
        trainer_id: str,
        pt_package_id: str,
        total_sessions: int,
        start_date: str,
        end_date: str,
        used_sessions: int = 0,
        status: str = "active",
        notes: str = "",
    ) -> PTSubscription:
        if not 0 <= used_sessions <= total_sessions:
            raise ValueError("Used sessions must be between 0 and the total number of sessions.")
        sub = PTSubscription(
            id=generate_id(),
            member_id=member_id,
            trainer_id=trainer_id,
            pt_package_id=pt_package_id,
            total_sessions=total_sessions,
            used_sessions=used_sessions,
            status=check_choice(status, PT_STATUSES, "PT subscription status"),
            start_date=start_date,
            end_date=end_date,
            created_at=now_iso(),
            notes=notes,
        )
        self.pt_subscriptions.append(sub)
        self.save()
        return sub

    def update_subscription(self, subscription_id: str, **fields) -> None:
        idx = find_index(self.pt_subscriptions, subscription_id)
        if idx == -1:
            return
        if "status" in fields:
            check_choice(fields["status"], PT_STATUSES, "PT subscription status")
        self.pt_subscriptions[idx] = self.pt_subscriptions[idx].merge(**fields)
        self.save()

    def add_session(self, subscription_id: str) -> PTSubscription | None:
        """
        Record one used session. Reaching the total marks the subscription
        completed in the same update; a full subscription is left unchanged.
        """
        idx = find_index(self.pt_subscriptions, subscription_id)
        if idx == -1:
            return None
        sub = self.pt_subscriptions[idx]
        if sub.used_sessions >= sub.total_sessions:
            return sub
        used = sub.used_sessions + 1
        status = "completed" if used >= sub.total_sessions else sub.status
        sub = dataclasses.replace(sub, used_sessions=used, status=status)
        self.pt_subscriptions[idx] = sub
        self.save()
        return sub

    def update_status(self, subscription_id: str, status: str) -> None:
        self.update_subscription(subscription_id, status=status)

    def delete_subscription(self, subscription_id: str) -> None:
        self.pt_subscriptions = [s for s in self.pt_subscriptions if s.id != subscription_id]
        self.save()
