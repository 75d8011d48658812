"""
navigation.py
Page table and the access guard used by the sidebar.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Page:
    name: str
    title: str
    requires_auth: bool = True
    admin_only: bool = False


PAGES = [
    Page("login", "Login", requires_auth=False),
    Page("dashboard", "Dashboard"),
    Page("members", "Members"),
    Page("staff", "Staff", admin_only=True),
    Page("trainers", "Trainers"),
    Page("packages", "Packages"),
    Page("memberships", "Memberships"),
    Page("payments", "Payments"),
    Page("pt", "Personal Training"),
    Page("reports", "Reports"),
    Page("checkins", "Check-ins"),
    Page("class-schedules", "Class Schedules"),
    Page("activity-log", "Activity Log", admin_only=True),
    Page("settings", "Settings"),
]

PAGES_BY_NAME = {p.name: p for p in PAGES}
HOME = "dashboard"
LOGIN = "login"


def resolve_page(requested: str, auth) -> str:
    """Return the page that should actually be shown for a request."""
    page = PAGES_BY_NAME.get(requested)
    if page is None:
        return HOME if auth.is_authenticated else LOGIN
    if page.requires_auth and not auth.is_authenticated:
        return LOGIN
    if page.name == LOGIN and auth.is_authenticated:
        return HOME
    if page.admin_only and not auth.is_admin:
        return HOME
    return page.name


def visible_pages(auth) -> list[Page]:
    """Pages listed in the sidebar for the current user."""
    if not auth.is_authenticated:
        return []
    return [p for p in PAGES if p.requires_auth and (auth.is_admin or not p.admin_only)]
