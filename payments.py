"""
payments.py
Payments store with invoice numbering and revenue roll-ups.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import NamedTuple

import config
import seed
from db import BaseStore, find_index
from models import PAYMENT_METHODS, PAYMENT_STATUSES, Payment, check_choice
from utils import generate_id, generate_invoice_number, month_label, now_iso, parse_timestamp

logger = logging.getLogger(__name__)


class RevenueSeries(NamedTuple):
    labels: list[str]
    values: list[float]


def _current_date() -> date:
    return datetime.now(timezone.utc).date()


class PaymentStore(BaseStore):
    name = "payments"

    def __init__(self, storage):
        self.payments: list[Payment] = []
        super().__init__(storage)

    def reset(self) -> None:
        self.payments = []

    def restore(self, snapshot: dict) -> None:
        self.payments = [Payment.from_dict(p) for p in snapshot.get("payments", [])]

    def snapshot(self) -> dict:
        return {"payments": [p.to_dict() for p in self.payments]}

    def init(self) -> None:
        if not self.initialized:
            self.payments = [Payment.from_dict(p) for p in seed.SEED_PAYMENTS]
            self.initialized = True
            logger.info("Seeded %d payments", len(self.payments))
            self.save()

    # ---------- views ----------

    @property
    def paid_payments(self) -> list[Payment]:
        return [p for p in self.payments if p.status == "paid"]

    @property
    def pending_payments(self) -> list[Payment]:
        return [p for p in self.payments if p.status == "pending"]

    @property
    def overdue_payments(self) -> list[Payment]:
        return [p for p in self.payments if p.status == "overdue"]

    @property
    def total_revenue(self) -> float:
        return sum(p.amount for p in self.paid_payments)

    @property
    def monthly_revenue(self) -> float:
        today = _current_date()
        return self.revenue_for_month(today.year, today.month)

    def revenue_for_month(self, year: int, month: int) -> float:
        total = 0
        for p in self.paid_payments:
            paid = parse_timestamp(p.paid_at)
            if paid.year == year and paid.month == month:
                total += p.amount
        return total

    def get_revenue_by_month(self, today: date | None = None) -> RevenueSeries:
        """
        Paid revenue for the trailing months, oldest first with the current
        month last. Labels look like 'Okt 26' and use the standard Indonesian
        abbreviations, so August is 'Agu'.
        """
        today = today or _current_date()
        labels: list[str] = []
        values: list[float] = []
        for back in range(config.REVENUE_MONTHS - 1, -1, -1):
            index = today.year * 12 + (today.month - 1) - back
            year, month = divmod(index, 12)
            month += 1
            labels.append(month_label(year, month))
            values.append(self.revenue_for_month(year, month))
        return RevenueSeries(labels, values)

    def get_payment_by_id(self, payment_id: str) -> Payment | None:
        return next((p for p in self.payments if p.id == payment_id), None)

    def get_payments_by_member(self, member_id: str) -> list[Payment]:
        return [p for p in self.payments if p.member_id == member_id]

    def get_payments_by_membership(self, membership_id: str) -> list[Payment]:
        return [p for p in self.payments if p.membership_id == membership_id]

    # ---------- mutations ----------

    def add_payment(
        self,
        membership_id: str,
        member_id: str,
        amount: float,
        method: str,
        status: str = "paid",
        paid_at: str | None = None,
        notes: str = "",
    ) -> Payment:
        if amount <= 0:
            raise ValueError("Amount must be > 0.")
        payment = Payment(
            id=generate_id(),
            membership_id=membership_id,
            member_id=member_id,
            amount=amount,
            method=check_choice(method, PAYMENT_METHODS, "payment method"),
            status=check_choice(status, PAYMENT_STATUSES, "payment status"),
            # Random suffix; collisions with existing invoices are not checked.
            invoice_number=generate_invoice_number(),
            paid_at=paid_at or now_iso(),
            created_at=now_iso(),
            notes=notes,
        )
        self.payments.append(payment)
        self.save()
        return payment

    def update_payment(self, payment_id: str, **fields) -> None:
        idx = find_index(self.payments, payment_id)
        if idx == -1:
            return
        if "status" in fields:
            check_choice(fields["status"], PAYMENT_STATUSES, "payment status")
        if "method" in fields:
            check_choice(fields["method"], PAYMENT_METHODS, "payment method")
        self.payments[idx] = self.payments[idx].merge(**fields)
        self.save()

    def delete_payment(self, payment_id: str) -> None:
        self.payments = [p for p in self.payments if p.id != payment_id]
        self.save()
