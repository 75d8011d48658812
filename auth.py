"""
auth.py
Password hashing (bcrypt) and the session-scoped login gate.
"""

from __future__ import annotations

import logging

import bcrypt

import config
from models import LOGIN_ROLES, User

logger = logging.getLogger(__name__)


def _to_bcrypt_secret(password: str) -> bytes:
    """
    bcrypt only uses the first 72 BYTES of the password.
    We truncate to 72 bytes to avoid ValueError and to make behavior explicit.
    """
    pw = password.encode("utf-8")
    if len(pw) > 72:
        pw = pw[:72]
    return pw


def hash_password(password: str) -> str:
    """
    Returns a bcrypt hash as a UTF-8 string (stored in the users snapshot).
    """
    secret = _to_bcrypt_secret(password)
    salt = bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(secret, salt)
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify password against stored bcrypt hash.
    """
    secret = _to_bcrypt_secret(password)
    try:
        return bcrypt.checkpw(secret, password_hash.encode("utf-8"))
    except ValueError:
        # Not a bcrypt hash at all.
        return False


class AuthGate:
    """
    Holds the logged-in user for one session.

    Only admin and staff accounts can log in. The users store is the source
    of truth: it is seeded with the default accounts on first load, so the
    demo credentials work until they are changed or deleted.
    """

    def __init__(self, users):
        self.users = users
        self.current_user: User | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    @property
    def is_admin(self) -> bool:
        return self.current_user is not None and self.current_user.role == "admin"

    def login(self, email: str, password: str) -> bool:
        for user in self.users.users:
            if user.email == email and user.role in LOGIN_ROLES and verify_password(password, user.password_hash):
                self.current_user = user
                logger.info("Login succeeded for %s (%s)", email, user.role)
                return True

        logger.info("Login failed for %s", email)
        return False

    def logout(self) -> None:
        self.current_user = None

    def update_current_user(self, **fields) -> None:
        """Merge fields into the session copy only; the users store is not touched."""
        if self.current_user is not None:
            self.current_user = self.current_user.merge(**fields)
