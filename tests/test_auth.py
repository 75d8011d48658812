from auth import AuthGate, hash_password, verify_password
from users import UserStore


def test_hash_and_verify():
    h = hash_password("s3cret")
    assert verify_password("s3cret", h)
    assert not verify_password("other", h)
    assert not verify_password("s3cret", "not-a-hash")


def test_long_passwords_are_truncated_to_72_bytes():
    h = hash_password("a" * 80)
    assert verify_password("a" * 72, h)


def test_wrong_password_fails(ctx):
    assert ctx.auth.login("admin@example.com", "wrongpass") is False
    assert not ctx.auth.is_authenticated


def test_trainer_and_member_cannot_log_in(ctx):
    assert ctx.auth.login("budi.trainer@example.com", "trainer123") is False
    assert ctx.auth.login("andi@example.com", "member123") is False
    assert ctx.auth.current_user is None


def test_staff_login(ctx):
    assert ctx.auth.login("staff@example.com", "staff123") is True
    assert ctx.auth.is_authenticated
    assert ctx.auth.current_user.role == "staff"
    assert not ctx.auth.is_admin


def test_admin_login_and_logout(ctx):
    assert ctx.auth.login("admin@example.com", "admin123")
    assert ctx.auth.is_admin
    ctx.auth.logout()
    assert not ctx.auth.is_authenticated
    ctx.auth.logout()
    assert ctx.auth.current_user is None


def test_login_uses_changed_password(ctx):
    ctx.users.change_password("u-admin-001", "admin123", "brandnew")
    assert not ctx.auth.login("admin@example.com", "admin123")
    assert ctx.auth.login("admin@example.com", "brandnew")


def test_update_current_user_only_touches_session(ctx):
    ctx.auth.update_current_user(name="Ghost")
    assert ctx.auth.current_user is None

    ctx.auth.login("admin@example.com", "admin123")
    ctx.auth.update_current_user(name="Renamed")
    assert ctx.auth.current_user.name == "Renamed"
    assert ctx.users.get_user_by_id("u-admin-001").name == "Admin Gym"



def test_fresh_store_accepts_default_accounts(storage):
    gate = AuthGate(UserStore(storage))
    assert gate.login("admin@example.com", "admin123")
    assert gate.current_user.id == "u-admin-001"
    assert gate.current_user.password_hash != "admin123"


def test_deleted_default_account_cannot_log_in(ctx):
    ctx.users.delete_user("u-staff-001")
    assert not ctx.auth.login("staff@example.com", "staff123")
    assert not AuthGate(UserStore(ctx.storage)).login("staff@example.com", "staff123")


def test_update_current_user_ignores_unknown_fields(ctx):
    ctx.auth.login("admin@example.com", "admin123")
    ctx.auth.update_current_user(name="Renamed", theme="dark")
    assert ctx.auth.current_user.name == "Renamed"
    assert not hasattr(ctx.auth.current_user, "theme")
