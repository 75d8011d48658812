"""
packages.py
Membership plans that members can buy.
"""

from __future__ import annotations

import seed
from db import BaseStore, find_index
from models import GymPackage
from utils import generate_id, now_iso


class PackageStore(BaseStore):
    name = "packages"

    def __init__(self, storage):
        self.packages: list[GymPackage] = []
        super().__init__(storage)

    def reset(self) -> None:
        self.packages = []

    def restore(self, snapshot: dict) -> None:
        self.packages = [GymPackage.from_dict(p) for p in snapshot.get("packages", [])]

    def snapshot(self) -> dict:
        return {"packages": [p.to_dict() for p in self.packages]}

    def init(self) -> None:
        if not self.initialized:
            self.packages = [GymPackage.from_dict(p) for p in seed.SEED_PACKAGES]
            self.initialized = True
            self.save()

    @property
    def active_packages(self) -> list[GymPackage]:
        return [p for p in self.packages if p.is_active]

    def get_package_by_id(self, package_id: str) -> GymPackage | None:
        return next((p for p in self.packages if p.id == package_id), None)

    def add_package(
        self,
        name: str,
        duration_days: int,
        price: float,
        description: str = "",
        features: list[str] | None = None,
        is_active: bool = True,
    ) -> GymPackage:
        if duration_days <= 0:
            raise ValueError("Package duration must be at least one day.")
        pkg = GymPackage(
            id=generate_id(),
            name=name,
            duration_days=duration_days,
            price=price,
            created_at=now_iso(),
            description=description,
            features=list(features or []),
            is_active=is_active,
        )
        self.packages.append(pkg)
        self.save()
        return pkg

    def update_package(self, package_id: str, **fields) -> None:
        idx = find_index(self.packages, package_id)
        if idx != -1:
            self.packages[idx] = self.packages[idx].merge(**fields)
            self.save()

    def delete_package(self, package_id: str) -> None:
        # Memberships keep their package_id; nothing cascades.
        self.packages = [p for p in self.packages if p.id != package_id]
        self.save()
