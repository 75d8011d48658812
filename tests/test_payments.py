import re
from datetime import date, datetime, timezone

import pytest

from payments import PaymentStore


def _current_month_paid(store):
    return store.get_revenue_by_month().values[-1]


def test_seeded_views(storage):
    store = PaymentStore(storage)
    assert store.initialized
    assert all(p.status == "paid" for p in store.paid_payments)
    assert [p.id for p in store.pending_payments] == ["pay-005"]
    assert store.overdue_payments == []
    assert store.total_revenue == sum(p.amount for p in store.paid_payments)


def test_add_payment_assigns_invoice(storage):
    store = PaymentStore(storage)
    p = store.add_payment("ms-001", "u-member-001", 350000, "cash")
    assert re.fullmatch(r"INV-\d{4}-\d{4}", p.invoice_number)
    assert store.get_payment_by_id(p.id) == p
    assert p in store.get_payments_by_member("u-member-001")
    assert p in store.get_payments_by_membership("ms-001")


def test_add_payment_validates(storage):
    store = PaymentStore(storage)
    with pytest.raises(ValueError):
        store.add_payment("ms-001", "u-member-001", 0, "cash")
    with pytest.raises(ValueError):
        store.add_payment("ms-001", "u-member-001", 1000, "cheque")
    with pytest.raises(ValueError):
        store.add_payment("ms-001", "u-member-001", 1000, "cash", status="refunded")


def test_monthly_revenue_counts_only_paid_this_month(storage):
    store = PaymentStore(storage)
    before = store.monthly_revenue
    total_before = store.total_revenue
    store.add_payment("ms-001", "u-member-001", 100000, "cash")
    store.add_payment("ms-001", "u-member-001", 40000, "cash", status="pending")
    store.add_payment("ms-001", "u-member-001", 70000, "cash", paid_at="2019-01-15T10:00:00+00:00")
    assert store.monthly_revenue == before + 100000
    assert store.total_revenue == total_before + 170000
    assert _current_month_paid(store) == store.monthly_revenue


def test_revenue_by_month_labels_and_values(storage):
    store = PaymentStore(storage)
    store.add_payment("x", "y", 500000, "qris", paid_at="2026-02-10T10:00:00+00:00")
    store.add_payment("x", "y", 250000, "qris", paid_at="2025-12-31T23:00:00+00:00")
    series = store.get_revenue_by_month(today=date(2026, 3, 5))
    assert series.labels == ["Okt 25", "Nov 25", "Des 25", "Jan 26", "Feb 26", "Mar 26"]
    assert series.values[2] == 250000
    assert series.values[4] == 500000
    assert series.values[-1] == 0


def test_revenue_by_month_with_no_payments_is_zeros(storage):
    store = PaymentStore(storage)
    for p in list(store.payments):
        store.delete_payment(p.id)
    series = store.get_revenue_by_month()
    assert len(series.labels) == 6
    assert series.values == [0, 0, 0, 0, 0, 0]
    now = datetime.now(timezone.utc)
    assert series.labels[-1].endswith(f"{now.year % 100:02d}")


def test_update_payment(storage):
    store = PaymentStore(storage)
    store.update_payment("pay-005", status="paid")
    assert store.get_payment_by_id("pay-005").status == "paid"
    store.update_payment("missing", status="paid")
    with pytest.raises(ValueError):
        store.update_payment("pay-005", status="lost")


def test_payments_survive_reload(storage):
    store = PaymentStore(storage)
    p = store.add_payment("ms-001", "u-member-001", 123000, "debit")
    store.delete_payment("pay-001")
    reloaded = PaymentStore(storage)
    assert reloaded.get_payment_by_id(p.id) == p
    assert reloaded.get_payment_by_id("pay-001") is None


def test_revenue_labels_abbreviate_august_as_agu(storage):
    store = PaymentStore(storage)
    series = store.get_revenue_by_month(today=date(2026, 9, 1))
    assert series.labels[-2:] == ["Agu 26", "Sep 26"]
