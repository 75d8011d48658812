"""
app.py
Streamlit Gym Admin Dashboard (admin + staff).
Run: streamlit run app.py
"""

from __future__ import annotations

from datetime import date, timedelta

import pandas as pd
import streamlit as st

import config
import navigation
import utils
from context import GymContext
from models import CLASS_CATEGORIES, DAYS, MEMBERSHIP_STATUSES, PAYMENT_METHODS, PAYMENT_STATUSES
from pagination import Paginator

st.set_page_config(page_title="Gym Admin Dashboard", layout="wide")


def init_once() -> GymContext:
    # One context per browser session; data comes from the local snapshot file.
    if "ctx" not in st.session_state:
        config.configure_logging()
        st.session_state.ctx = GymContext()
    if "page" not in st.session_state:
        st.session_state.page = navigation.HOME
    return st.session_state.ctx


def logout(ctx: GymContext):
    ctx.auth.logout()
    st.session_state.page = navigation.LOGIN
    st.success("Logged out.")


def login_screen(ctx: GymContext):
    st.title("🔐 Gym Admin Login")

    col1, col2 = st.columns([1, 1])
    with col1:
        email = st.text_input("Email", value="admin@example.com")
        password = st.text_input("Password", type="password")
        if st.button("Login", type="primary"):
            if ctx.auth.login(email.strip(), password):
                st.session_state.page = navigation.HOME
                st.rerun()
            else:
                st.error("Invalid email or password.")

    with col2:
        st.info(
            "Only admin and staff accounts can log in.\n\n"
            "Demo accounts on first run:\n\n"
            "- **admin@example.com** / **admin123**\n"
            "- **staff@example.com** / **staff123**"
        )


def show_table(records, columns: list[str], key: str):
    """Dataframe with simple paging controls underneath."""
    pager_key = f"pager_{key}"
    if pager_key not in st.session_state:
        st.session_state[pager_key] = Paginator(lambda: [], per_page=config.DEFAULT_PAGE_SIZE)
    pager = st.session_state[pager_key]
    pager.source = lambda: records

    st.dataframe(utils.records_to_frame(pager.items, columns), use_container_width=True, hide_index=True)
    c1, c2, c3 = st.columns([1, 4, 1])
    with c1:
        if st.button("◀ Prev", key=f"{key}_prev", disabled=pager.current_page == 1):
            pager.prev_page()
            st.rerun()
    with c2:
        st.caption(f"Showing {pager.start_index}-{pager.end_index} of {pager.total_items} · page {pager.current_page}/{pager.total_pages}")
    with c3:
        if st.button("Next ▶", key=f"{key}_next", disabled=pager.current_page == pager.total_pages):
            pager.next_page()
            st.rerun()


def member_label(ctx: GymContext, member_id: str) -> str:
    user = ctx.users.get_user_by_id(member_id)
    return user.name if user else member_id


def class_name(ctx: GymContext, class_id: str) -> str:
    gym_class = ctx.classes.get_class_by_id(class_id)
    return gym_class.name if gym_class else class_id


# ---------- Pages ----------

def dashboard_page(ctx: GymContext):
    st.header("📊 Dashboard")

    stats = ctx.dashboard_stats()
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Members", stats.total_members, f"{stats.new_members_this_month} new this month")
    c2.metric("Active members", stats.active_members)
    c3.metric("Staff / Trainers", f"{stats.total_staff} / {stats.total_trainers}")
    c4.metric("Monthly revenue", utils.format_currency(stats.monthly_revenue))

    c5, c6, c7 = st.columns(3)
    c5.metric("Pending payments", stats.pending_payments)
    c6.metric("Expiring in 7 days", stats.expiring_memberships)
    c7.metric("Checked in now", len(ctx.checkins.active_checkins))

    st.divider()

    st.subheader("Revenue (last 6 months)")
    df = utils.revenue_frame(ctx.payments.get_revenue_by_month())
    st.bar_chart(df, x="month", y="revenue")

    st.subheader("Expiring soon (next 7 days)")
    rows = [
        {
            "member": member_label(ctx, m.member_id),
            "end_date": utils.format_date(m.end_date),
            "days_left": utils.days_remaining(m.end_date),
        }
        for m in ctx.memberships.expiring_memberships
    ]
    if rows:
        st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
    else:
        st.caption("No memberships expiring in the next 7 days.")


def user_form(ctx: GymContext, role: str):
    st.subheader(f"➕ Add {utils.get_role_label(role)}")
    col1, col2, col3 = st.columns(3)
    with col1:
        name = st.text_input("Full name", key=f"new_{role}_name")
        email = st.text_input("Email", key=f"new_{role}_email")
    with col2:
        phone = st.text_input("Phone", key=f"new_{role}_phone")
        gender = st.selectbox("Gender", ["male", "female"], format_func=utils.get_gender_label, key=f"new_{role}_gender")
    with col3:
        address = st.text_input("Address", key=f"new_{role}_address")
        birth_date = st.date_input("Birth date", value=None, key=f"new_{role}_birth")

    if st.button("Save", type="primary", key=f"new_{role}_save"):
        if not name.strip() or not email.strip():
            st.error("Name and email are required.")
            return
        user, password = ctx.users.add_user(
            name=name.strip(),
            email=email.strip(),
            phone=phone.strip(),
            gender=gender,
            address=address.strip(),
            role=role,
            birth_date=birth_date.isoformat() if birth_date else None,
        )
        ctx.activity.add_log("create", role, user.id, user.name, f"Created {role} account")
        st.success(f"Created {user.name}. Initial password (shown once): `{password}`")


def users_page(ctx: GymContext, role: str, title: str):
    st.header(title)

    users = ctx.users.get_users_by_role(role)
    search = st.sidebar.text_input("Search (name/email/phone)", key=f"search_{role}")
    if search.strip():
        needle = search.strip().lower()
        users = [u for u in users if needle in u.name.lower() or needle in u.email.lower() or needle in u.phone]

    show_table(users, ["id", "name", "email", "phone", "gender", "is_active", "created_at"], key=role)

    st.divider()

    options = {f"{u.name} ({u.email})": u.id for u in users}
    chosen = st.selectbox("Select", ["(none)"] + list(options), key=f"sel_{role}")
    if chosen != "(none)":
        user = ctx.users.get_user_by_id(options[chosen])
        c1, c2, c3 = st.columns(3)
        with c1:
            label = "Deactivate" if user.is_active else "Activate"
            if st.button(label, key=f"toggle_{role}"):
                ctx.users.toggle_active(user.id)
                ctx.activity.add_log("toggle_active", role, user.id, user.name, f"{label}d account")
                st.rerun()
        with c2:
            if st.button("Reset password", key=f"reset_{role}"):
                password = ctx.users.reset_password(user.id)
                ctx.activity.add_log("reset_password", role, user.id, user.name, "Password reset")
                st.success(f"New password (shown once): `{password}`")
        with c3:
            confirm = st.checkbox("Confirm delete", value=False, key=f"del_confirm_{role}")
            if st.button("Delete", type="secondary", disabled=not confirm, key=f"del_{role}"):
                ctx.users.delete_user(user.id)
                ctx.activity.add_log("delete", role, user.id, user.name, "Deleted account")
                st.rerun()

        if role == "member":
            membership = ctx.memberships.get_active_membership_by_member(user.id)
            subscription = ctx.pt.get_active_subscription_by_member(user.id)
            st.write(
                f"Active membership ends: **{utils.format_date(membership.end_date) if membership else '-'}** | "
                f"PT sessions left: **{subscription.remaining_sessions if subscription else '-'}** | "
                f"Age: **{utils.calculate_age(user.birth_date) or '-'}**"
            )

    st.divider()
    user_form(ctx, role)


def packages_page(ctx: GymContext):
    st.header("📦 Packages")
    show_table(ctx.packages.packages, ["id", "name", "duration_days", "price", "is_active"], key="packages")

    st.subheader("➕ Add package")
    c1, c2, c3 = st.columns(3)
    with c1:
        name = st.text_input("Name")
        description = st.text_input("Description")
    with c2:
        duration = st.number_input("Duration (days)", min_value=1, value=30)
        price = st.number_input("Price (Rp)", min_value=0, value=350000, step=50000)
    with c3:
        features = st.text_input("Features (comma separated)")
    if st.button("Save package", type="primary"):
        if not name.strip():
            st.error("Name is required.")
        else:
            pkg = ctx.packages.add_package(
                name=name.strip(),
                duration_days=int(duration),
                price=float(price),
                description=description.strip(),
                features=[f.strip() for f in features.split(",") if f.strip()],
            )
            ctx.activity.add_log("create", "package", pkg.id, pkg.name, utils.format_currency(pkg.price))
            st.rerun()


def memberships_page(ctx: GymContext):
    st.header("🪪 Memberships")

    status_filter = st.sidebar.selectbox("Status", ["All", *MEMBERSHIP_STATUSES])
    rows = ctx.memberships.memberships
    if status_filter != "All":
        rows = [m for m in rows if m.status == status_filter]
    show_table(rows, ["id", "member_id", "package_id", "start_date", "end_date", "status"], key="memberships")

    st.divider()

    members = ctx.users.active_members
    packages = ctx.packages.active_packages
    if not members or not packages:
        st.info("Add an active member and an active package first.")
        return

    st.subheader("➕ New membership")
    c1, c2, c3 = st.columns(3)
    with c1:
        member = st.selectbox("Member", members, format_func=lambda u: u.name)
    with c2:
        pkg = st.selectbox("Package", packages, format_func=lambda p: f"{p.name} ({utils.format_currency(p.price)})")
    with c3:
        start = st.date_input("Start date", value=date.today())
    end = utils.add_days(start.isoformat(), pkg.duration_days)
    st.info(f"End date: **{utils.format_date(end)}**")

    record_payment = st.toggle("Record payment now", value=True)
    method = st.selectbox("Payment method", PAYMENT_METHODS, format_func=utils.get_payment_method_label, disabled=not record_payment)

    if st.button("Create membership", type="primary"):
        membership = ctx.memberships.add_membership(member.id, pkg.id, start.isoformat(), end)
        ctx.activity.add_log("create", "membership", membership.id, member.name, pkg.name)
        if record_payment:
            payment = ctx.payments.add_payment(membership.id, member.id, pkg.price, method)
            ctx.activity.add_log("create", "payment", payment.id, member.name, payment.invoice_number)
        st.success("Membership created.")
        st.rerun()

    st.subheader("Change status")
    chosen = st.selectbox("Membership", ctx.memberships.memberships, format_func=lambda m: f"{member_label(ctx, m.member_id)} · {m.end_date} · {m.status}")
    new_status = st.selectbox("New status", MEMBERSHIP_STATUSES)
    if st.button("Update status"):
        ctx.memberships.update_status(chosen.id, new_status)
        ctx.activity.add_log("update", "membership", chosen.id, member_label(ctx, chosen.member_id), f"Status → {new_status}")
        st.rerun()


def payments_page(ctx: GymContext):
    st.header("💳 Payments")

    c1, c2, c3 = st.columns(3)
    c1.metric("Total revenue", utils.format_currency(ctx.payments.total_revenue))
    c2.metric("This month", utils.format_currency(ctx.payments.monthly_revenue))
    c3.metric("Overdue", len(ctx.payments.overdue_payments))

    status_filter = st.sidebar.selectbox("Payment status", ["All", *PAYMENT_STATUSES])
    rows = ctx.payments.payments
    if status_filter != "All":
        rows = [p for p in rows if p.status == status_filter]
    show_table(rows, ["invoice_number", "member_id", "amount", "method", "status", "paid_at"], key="payments")

    st.divider()
    st.subheader("Update payment status")
    if not ctx.payments.payments:
        return
    chosen = st.selectbox("Invoice", ctx.payments.payments, format_func=lambda p: f"{p.invoice_number} · {utils.format_currency(p.amount)} · {p.status}")
    new_status = st.selectbox("New status", PAYMENT_STATUSES)
    if st.button("Update", type="primary"):
        ctx.payments.update_payment(chosen.id, status=new_status)
        ctx.activity.add_log("update", "payment", chosen.id, chosen.invoice_number, f"Status → {new_status}")
        st.rerun()


def pt_page(ctx: GymContext):
    st.header("🏋️ Personal Training")

    show_table(ctx.pt.pt_subscriptions, ["id", "member_id", "trainer_id", "used_sessions", "total_sessions", "status", "end_date"], key="pt")

    active = ctx.pt.active_subscriptions
    if active:
        st.subheader("Record a session")
        sub = st.selectbox("Subscription", active, format_func=lambda s: f"{member_label(ctx, s.member_id)} · {s.used_sessions}/{s.total_sessions}")
        if st.button("Add session", type="primary"):
            updated = ctx.pt.add_session(sub.id)
            ctx.activity.add_log("update", "pt_subscription", sub.id, member_label(ctx, sub.member_id), f"Session {updated.used_sessions}/{updated.total_sessions}")
            st.rerun()

    st.divider()
    st.subheader("➕ New PT subscription")
    members = ctx.users.active_members
    trainers = ctx.users.trainers
    packages = ctx.pt.active_pt_packages
    if not members or not trainers or not packages:
        st.info("Members, trainers and PT packages are required.")
        return
    c1, c2, c3 = st.columns(3)
    with c1:
        member = st.selectbox("Member", members, format_func=lambda u: u.name, key="pt_member")
    with c2:
        trainer = st.selectbox("Trainer", trainers, format_func=lambda u: u.name, key="pt_trainer")
    with c3:
        pkg = st.selectbox("PT package", packages, format_func=lambda p: f"{p.name} ({utils.format_currency(p.total_price)})")
    start = st.date_input("Start date", value=date.today(), key="pt_start")
    end = st.date_input("End date", value=date.today() + timedelta(days=60), key="pt_end")
    if st.button("Create subscription"):
        sub = ctx.pt.add_subscription(member.id, trainer.id, pkg.id, pkg.sessions, start.isoformat(), end.isoformat())
        ctx.activity.add_log("create", "pt_subscription", sub.id, member.name, pkg.name)
        st.rerun()


def reports_page(ctx: GymContext):
    st.header("🧾 Reports")

    st.subheader("Export members to CSV")
    st.download_button(
        "Download members.csv",
        data=utils.records_to_csv_bytes(ctx.users.members, ["id", "name", "email", "phone", "gender", "is_active", "created_at"]),
        file_name="members.csv",
        mime="text/csv",
    )

    st.subheader("Export payments to CSV")
    st.download_button(
        "Download payments.csv",
        data=utils.records_to_csv_bytes(ctx.payments.payments),
        file_name="payments.csv",
        mime="text/csv",
    )

    st.divider()

    st.subheader("Revenue summary by month")
    df = utils.revenue_frame(ctx.payments.get_revenue_by_month())
    df["formatted"] = df["revenue"].map(utils.format_currency)
    st.dataframe(df, use_container_width=True, hide_index=True)


def checkins_page(ctx: GymContext):
    st.header("✅ Check-ins")

    members = ctx.users.active_members
    if members:
        c1, c2 = st.columns([2, 3])
        with c1:
            member = st.selectbox("Member", members, format_func=lambda u: u.name)
        with c2:
            notes = st.text_input("Notes")
        if st.button("Check in", type="primary"):
            result = ctx.checkins.check_in(member.id, member.name, notes.strip())
            if result:
                ctx.activity.add_log("checkin", "checkin", result.value.id, member.name, "Checked in")
                st.success(result.message)
            else:
                st.error(result.message)

    st.subheader("In the gym now")
    for c in ctx.checkins.active_checkins:
        col1, col2 = st.columns([4, 1])
        col1.write(f"**{c.member_name}** since {utils.format_datetime(c.check_in_time)}")
        if col2.button("Check out", key=f"out_{c.id}"):
            ctx.checkins.check_out(c.id)
            st.rerun()

    st.subheader("History")
    day = st.date_input("Date", value=date.today())
    show_table(ctx.checkins.get_checkins_by_date(day.isoformat()), ["member_name", "check_in_time", "check_out_time", "notes"], key="checkins")


def class_schedules_page(ctx: GymContext):
    st.header("📅 Class Schedules")

    day = st.selectbox("Day", DAYS, format_func=str.capitalize)
    rows = [
        {
            "time": f"{s.start_time}-{s.end_time}",
            "class": class_name(ctx, s.class_id),
            "room": s.room,
            "capacity": s.max_participants,
            "trainer": member_label(ctx, s.trainer_id) if s.trainer_id else "-",
        }
        for s in ctx.classes.get_schedules_by_day(day)
    ]
    if rows:
        st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
    else:
        st.caption("No classes scheduled.")

    st.divider()
    st.subheader("➕ Add schedule slot")
    classes = ctx.classes.active_classes
    c1, c2, c3 = st.columns(3)
    with c1:
        gym_class = st.selectbox("Class", classes, format_func=lambda c: f"{c.name} ({c.category})")
        room = st.text_input("Room", value="Studio 1")
    with c2:
        start = st.time_input("Start", value=None)
        end = st.time_input("End", value=None)
    with c3:
        capacity = st.number_input("Max participants", min_value=1, value=20)
        trainer = st.selectbox("Trainer", [None, *ctx.users.trainers], format_func=lambda u: u.name if u else "-")
    if st.button("Save slot", type="primary"):
        if start is None or end is None:
            st.error("Start and end time are required.")
            return
        try:
            ctx.classes.add_schedule(
                gym_class.id, day, start.strftime("%H:%M"), end.strftime("%H:%M"), int(capacity), room.strip(),
                trainer_id=trainer.id if trainer else None,
            )
        except ValueError as e:
            st.error(str(e))
            return
        st.rerun()

    st.divider()
    st.subheader("Class catalog")
    for category, items in ctx.classes.classes_by_category.items():
        st.write(f"**{category}**: " + ", ".join(c.name for c in items))
    with st.expander("Add class"):
        name = st.text_input("Class name")
        category = st.selectbox("Category", CLASS_CATEGORIES)
        if st.button("Add class"):
            if not name.strip():
                st.error("Class name is required.")
                return
            ctx.classes.add_class(name.strip(), category)
            st.rerun()


def activity_log_page(ctx: GymContext):
    st.header("📝 Activity Log")
    show_table(ctx.activity.recent_logs, ["timestamp", "user_name", "user_role", "action", "target_type", "target_name", "details"], key="activity")
    confirm = st.checkbox("Confirm clear", value=False)
    if st.button("Clear log", disabled=not confirm):
        ctx.activity.clear_logs()
        st.rerun()


def settings_page(ctx: GymContext):
    st.header("⚙️ Settings")

    st.subheader("Change password")
    old = st.text_input("Current password", type="password")
    p1 = st.text_input("New password", type="password")
    p2 = st.text_input("Confirm new password", type="password")
    if st.button("Update password", type="primary"):
        if p1 != p2:
            st.error("Passwords do not match.")
            return
        result = ctx.users.change_password(ctx.auth.current_user.id, old, p1)
        if result:
            st.success(result.message)
        else:
            st.error(result.message)


PAGE_VIEWS = {
    "dashboard": dashboard_page,
    "members": lambda ctx: users_page(ctx, "member", "👥 Members"),
    "staff": lambda ctx: users_page(ctx, "staff", "🧑‍💼 Staff"),
    "trainers": lambda ctx: users_page(ctx, "trainer", "💪 Trainers"),
    "packages": packages_page,
    "memberships": memberships_page,
    "payments": payments_page,
    "pt": pt_page,
    "reports": reports_page,
    "checkins": checkins_page,
    "class-schedules": class_schedules_page,
    "activity-log": activity_log_page,
    "settings": settings_page,
}


def main_app(ctx: GymContext):
    user = ctx.auth.current_user
    st.sidebar.title("🏋️ Gym Admin")
    st.sidebar.caption(f"Logged in as: {user.name} ({utils.get_role_label(user.role)})")

    pages = navigation.visible_pages(ctx.auth)
    names = [p.name for p in pages]
    current = navigation.resolve_page(st.session_state.page, ctx.auth)
    if current not in names:
        current = navigation.HOME
    chosen = st.sidebar.radio("Navigate", pages, index=names.index(current), format_func=lambda p: p.title)
    st.session_state.page = navigation.resolve_page(chosen.name, ctx.auth)

    if st.sidebar.button("Logout"):
        logout(ctx)
        st.rerun()

    PAGE_VIEWS[st.session_state.page](ctx)


# --------- App entry ---------

def run():
    ctx = init_once()

    if navigation.resolve_page(st.session_state.page, ctx.auth) == navigation.LOGIN:
        login_screen(ctx)
        return

    main_app(ctx)


if __name__ == "__main__":
    run()
