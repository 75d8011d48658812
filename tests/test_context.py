from context import GymContext


def test_context_wires_stores(ctx):
    assert ctx.auth.users is ctx.users
    assert ctx.activity.auth is ctx.auth
    assert ctx.classes.get_class_by_id("cls-yoga") is not None


def test_dashboard_stats(ctx):
    stats = ctx.dashboard_stats()
    assert stats.total_members == len(ctx.users.members)
    assert stats.active_members == len(ctx.users.active_members)
    assert stats.total_staff == 1
    assert stats.total_trainers == 3
    assert stats.pending_payments == len(ctx.payments.pending_payments)
    assert stats.monthly_revenue == ctx.payments.monthly_revenue
    assert stats.new_members_this_month == 0

    ctx.users.add_user(name="Baru", email="baru@example.com", role="member")
    assert ctx.dashboard_stats().new_members_this_month == 1
    assert ctx.dashboard_stats().total_members == stats.total_members + 1


def test_contexts_share_storage_not_memory(ctx, storage):
    ctx.users.delete_user("u-member-001")
    other = GymContext(storage=storage)
    assert other.users.get_user_by_id("u-member-001") is None
    other.auth.login("admin@example.com", "admin123")
    assert not ctx.auth.is_authenticated
