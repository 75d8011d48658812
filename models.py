"""
models.py
Domain records (frozen dataclasses), enum values and the Result type.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any

ROLES = ("admin", "staff", "trainer", "member")
LOGIN_ROLES = ("admin", "staff")
MEMBERSHIP_STATUSES = ("active", "expired", "pending", "frozen")
PAYMENT_STATUSES = ("paid", "pending", "overdue", "cancelled")
PAYMENT_METHODS = ("cash", "transfer", "qris", "debit")
PT_STATUSES = ("active", "completed", "expired", "cancelled")
CLASS_CATEGORIES = ("cardio", "strength", "functional", "mind-body")
DAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
ACTIVITY_ACTIONS = ("create", "update", "delete", "reset_password", "toggle_active", "checkin")


def check_choice(value: str, choices: tuple[str, ...], what: str) -> str:
    if value not in choices:
        raise ValueError(f"Invalid {what} {value!r}; expected one of {', '.join(choices)}.")
    return value


class Record:
    """Serialisation shared by every record type."""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        # Unknown keys are dropped so snapshots written by other versions still load.
        if not isinstance(data, dict):
            raise TypeError(f"{cls.__name__} record must be an object, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def merge(self, **changes):
        """Copy with `changes` applied; keys that are not fields of the record are ignored."""
        known = {f.name for f in fields(self)}
        return replace(self, **{k: v for k, v in changes.items() if k in known})


@dataclass(frozen=True)
class User(Record):
    id: str
    name: str
    email: str
    password_hash: str
    role: str
    created_at: str
    updated_at: str
    phone: str = ""
    gender: str = "male"
    address: str = ""
    is_active: bool = True
    nik: str | None = None
    birth_date: str | None = None
    blood_type: str = ""
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    photo: str | None = None
    notes: str | None = None
    avatar: str | None = None


@dataclass(frozen=True)
class GymPackage(Record):
    id: str
    name: str
    duration_days: int
    price: float
    created_at: str
    description: str = ""
    features: list[str] = field(default_factory=list)
    is_active: bool = True


@dataclass(frozen=True)
class Membership(Record):
    id: str
    member_id: str
    package_id: str
    start_date: str
    end_date: str
    status: str  # active/expired/pending/frozen
    created_at: str
    notes: str = ""
    trainer_id: str | None = None


@dataclass(frozen=True)
class Payment(Record):
    id: str
    membership_id: str
    member_id: str
    amount: float
    method: str  # cash/transfer/qris/debit
    status: str  # paid/pending/overdue/cancelled
    invoice_number: str
    paid_at: str
    created_at: str
    notes: str = ""


@dataclass(frozen=True)
class PTPackage(Record):
    id: str
    name: str
    sessions: int
    price_per_session: float
    total_price: float
    created_at: str
    description: str = ""
    is_active: bool = True


@dataclass(frozen=True)
class PTSubscription(Record):
    id: str
    member_id: str
    trainer_id: str
    pt_package_id: str
    total_sessions: int
    used_sessions: int
    status: str  # active/completed/expired/cancelled
    start_date: str
    end_date: str
    created_at: str
    notes: str = ""

    @property
    def remaining_sessions(self) -> int:
        return max(0, self.total_sessions - self.used_sessions)


@dataclass(frozen=True)
class GymClass(Record):
    id: str
    name: str
    category: str
    description: str = ""
    is_active: bool = True


@dataclass(frozen=True)
class ClassSchedule(Record):
    id: str
    class_id: str
    day: str
    start_time: str  # HH:MM
    end_time: str  # HH:MM
    max_participants: int
    room: str
    created_at: str
    updated_at: str
    is_active: bool = True
    trainer_id: str | None = None


@dataclass(frozen=True)
class CheckIn(Record):
    id: str
    member_id: str
    member_name: str
    check_in_time: str
    notes: str = ""
    check_out_time: str | None = None

    @property
    def is_open(self) -> bool:
        return not self.check_out_time


@dataclass(frozen=True)
class ActivityLog(Record):
    id: str
    user_id: str
    user_name: str
    user_role: str
    action: str
    target_type: str
    target_id: str
    target_name: str
    details: str
    timestamp: str


@dataclass(frozen=True)
class Result:
    """Outcome of a business-rule operation."""

    success: bool
    message: str
    code: str | None = None
    value: Any = None

    def __bool__(self) -> bool:
        return self.success
