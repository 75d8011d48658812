"""
utils.py
Identifiers, generated secrets, dates, Indonesian formatting labels and CSV exports.
"""

from __future__ import annotations

import math
import secrets
import uuid
from datetime import date, datetime, timedelta, timezone
from typing import Iterable

import pandas as pd

import config

MONTHS_ID = ["Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des"]

# Ambiguous glyphs (I, l, O, 0, 1) are left out of generated passwords.
UPPERCASE = "ABCDEFGHJKLMNPQRSTUVWXYZ"
LOWERCASE = "abcdefghjkmnpqrstuvwxyz"
DIGITS = "23456789"
SYMBOLS = "!@#$%"

_random = secrets.SystemRandom()


def generate_id() -> str:
    return uuid.uuid4().hex


def generate_password(length: int = config.PASSWORD_LENGTH) -> str:
    """
    Random password with at least one uppercase letter, lowercase letter,
    digit and symbol. The remaining characters come from the union of the
    four classes, then the whole string is shuffled.
    """
    alphabet = UPPERCASE + LOWERCASE + DIGITS + SYMBOLS
    chars = [
        _random.choice(UPPERCASE),
        _random.choice(LOWERCASE),
        _random.choice(DIGITS),
        _random.choice(SYMBOLS),
    ]
    chars.extend(_random.choice(alphabet) for _ in range(length - len(chars)))
    _random.shuffle(chars)
    return "".join(chars)


def generate_invoice_number(when: datetime | None = None) -> str:
    when = when or datetime.now(timezone.utc)
    return f"INV-{when:%y%m}-{_random.randrange(10000):04d}"


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def today_iso() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO date or instant into an aware UTC datetime.
    Plain dates are taken as midnight UTC.
    """
    if len(value) == 10:
        return datetime.combine(date.fromisoformat(value), datetime.min.time(), tzinfo=timezone.utc)
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def days_remaining(end_date: str, now: datetime | None = None) -> int:
    """Whole days until end_date, rounded up. Negative once the date has passed."""
    now = now or datetime.now(timezone.utc)
    diff = parse_timestamp(end_date) - now
    return math.ceil(diff.total_seconds() / 86400)


def add_days(date_str: str, days: int) -> str:
    return (parse_timestamp(date_str).date() + timedelta(days=days)).isoformat()


def calculate_age(birth_date: str | None, today: date | None = None) -> int:
    if not birth_date:
        return 0
    today = today or date.today()
    birth = date.fromisoformat(birth_date[:10])
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


def format_currency(amount: float) -> str:
    """Indonesian Rupiah without decimals, e.g. 'Rp 1.500.000'."""
    rounded = round(amount)
    body = f"{abs(rounded):,}".replace(",", ".")
    sign = "-" if rounded < 0 else ""
    return f"{sign}Rp {body}"


def _display_date(value: str) -> tuple[date, datetime | None]:
    if len(value) == 10:
        return date.fromisoformat(value), None
    dt = parse_timestamp(value).astimezone()
    return dt.date(), dt


def format_date(value: str | None) -> str:
    if not value:
        return "-"
    d, _ = _display_date(value)
    return f"{d.day:02d} {MONTHS_ID[d.month - 1]} {d.year}"


def format_datetime(value: str | None) -> str:
    if not value:
        return "-"
    d, dt = _display_date(value)
    clock = f"{dt:%H.%M}" if dt else "00.00"
    return f"{d.day:02d} {MONTHS_ID[d.month - 1]} {d.year} {clock}"


def month_label(year: int, month: int) -> str:
    return f"{MONTHS_ID[month - 1]} {year % 100:02d}"


STATUS_COLORS = {
    "active": "green",
    "expired": "red",
    "pending": "orange",
    "frozen": "blue",
    "paid": "green",
    "overdue": "red",
    "cancelled": "gray",
    "completed": "violet",
}

ROLE_COLORS = {
    "admin": "violet",
    "staff": "blue",
    "trainer": "orange",
    "member": "green",
}

ROLE_LABELS = {
    "admin": "Admin",
    "staff": "Staff",
    "trainer": "Personal Trainer",
    "member": "Member",
}

PAYMENT_METHOD_LABELS = {
    "cash": "Cash",
    "transfer": "Transfer Bank",
    "qris": "QRIS",
    "debit": "Kartu Debit",
}


def get_status_color(status: str) -> str:
    return STATUS_COLORS.get(status, "gray")


def get_role_color(role: str) -> str:
    return ROLE_COLORS.get(role, "gray")


def get_role_label(role: str) -> str:
    return ROLE_LABELS.get(role, role)


def get_payment_method_label(method: str) -> str:
    return PAYMENT_METHOD_LABELS.get(method, method)


def get_gender_label(gender: str) -> str:
    return "Laki-laki" if gender == "male" else "Perempuan"


# ---------- Exports ----------

def records_to_frame(records: Iterable, columns: list[str] | None = None) -> pd.DataFrame:
    rows = [r.to_dict() for r in records]
    if not rows:
        return pd.DataFrame(columns=columns or [])
    df = pd.DataFrame(rows)
    return df[columns] if columns else df


def records_to_csv_bytes(records: Iterable, columns: list[str] | None = None) -> bytes:
    return records_to_frame(records, columns).to_csv(index=False).encode("utf-8")


def revenue_frame(series) -> pd.DataFrame:
    return pd.DataFrame({"month": series.labels, "revenue": series.values})
