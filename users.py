"""
users.py
Users store: members, staff, trainers and admins, plus password management.
"""

from __future__ import annotations

import dataclasses
import logging

import config
import seed
from auth import hash_password, verify_password
from db import BaseStore, find_index
from models import ROLES, Result, User, check_choice
from utils import generate_id, generate_password, now_iso

logger = logging.getLogger(__name__)


class UserStore(BaseStore):
    name = "users"

    def __init__(self, storage):
        self.users: list[User] = []
        super().__init__(storage)

    # ---------- persistence ----------

    def reset(self) -> None:
        self.users = []

    def restore(self, snapshot: dict) -> None:
        self.users = [User.from_dict(u) for u in snapshot.get("users", [])]

    def snapshot(self) -> dict:
        return {"users": [u.to_dict() for u in self.users]}

    def init(self) -> None:
        if not self.initialized:
            self.users = [seed.seed_user(d, hash_password(d["password"])) for d in seed.SEED_USERS]
            self.initialized = True
            logger.info("Seeded %d users", len(self.users))
        else:
            # Only fill in avatars that are missing; every other field stays as stored.
            seed_avatars = {d["id"]: d.get("avatar") for d in seed.SEED_USERS}
            self.users = [
                dataclasses.replace(u, avatar=seed_avatars[u.id])
                if not u.avatar and seed_avatars.get(u.id)
                else u
                for u in self.users
            ]
        self.save()

    # ---------- views ----------

    @property
    def members(self) -> list[User]:
        return self.get_users_by_role("member")

    @property
    def staff(self) -> list[User]:
        return self.get_users_by_role("staff")

    @property
    def trainers(self) -> list[User]:
        return self.get_users_by_role("trainer")

    @property
    def admins(self) -> list[User]:
        return self.get_users_by_role("admin")

    @property
    def active_members(self) -> list[User]:
        return [u for u in self.members if u.is_active]

    def get_user_by_id(self, user_id: str) -> User | None:
        return next((u for u in self.users if u.id == user_id), None)

    def get_users_by_role(self, role: str) -> list[User]:
        return [u for u in self.users if u.role == role]

    # ---------- mutations ----------

    def add_user(self, **profile) -> tuple[User, str]:
        """
        Create a user with a generated password.
        Returns the new record and the plaintext password, which is not kept.
        """
        check_choice(profile.get("role", ""), ROLES, "role")
        password = generate_password()
        now = now_iso()
        user = User(
            id=generate_id(),
            password_hash=hash_password(password),
            created_at=now,
            updated_at=now,
            **profile,
        )
        self.users.append(user)
        self.save()
        logger.info("Created %s account %s", user.role, user.email)
        return user, password

    def update_user(self, user_id: str, **fields) -> None:
        idx = find_index(self.users, user_id)
        if idx == -1:
            return
        if "role" in fields:
            check_choice(fields["role"], ROLES, "role")
        self.users[idx] = self.users[idx].merge(**{**fields, "updated_at": now_iso()})
        self.save()

    def delete_user(self, user_id: str) -> None:
        self.users = [u for u in self.users if u.id != user_id]
        self.save()

    def reset_password(self, user_id: str) -> str | None:
        if self.get_user_by_id(user_id) is None:
            return None
        password = generate_password()
        self.update_user(user_id, password_hash=hash_password(password))
        logger.info("Password reset for user %s", user_id)
        return password

    def change_password(self, user_id: str, old_password: str, new_password: str) -> Result:
        user = self.get_user_by_id(user_id)
        if user is None:
            return Result(False, "User not found.", code="not_found")
        if not verify_password(old_password, user.password_hash):
            return Result(False, "Current password is incorrect.", code="wrong_password")
        if len(new_password) < config.MIN_PASSWORD_LENGTH:
            return Result(
                False,
                f"New password must be at least {config.MIN_PASSWORD_LENGTH} characters.",
                code="too_short",
            )
        self.update_user(user_id, password_hash=hash_password(new_password))
        return Result(True, "Password updated.")

    def toggle_active(self, user_id: str) -> None:
        user = self.get_user_by_id(user_id)
        if user:
            self.update_user(user_id, is_active=not user.is_active)
