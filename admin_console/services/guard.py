"""Auth guard. Decides whether a view may render for the current session."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from admin_console.services.session import Session

LOGIN_VIEW = "/login"
DEFAULT_VIEW = "/dashboard"


class GuardState(str, enum.Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class NavLink:
    label: str
    href: str


PROTECTED_LINKS: tuple[NavLink, ...] = (
    NavLink("Dashboard", DEFAULT_VIEW),
    NavLink("Users", "/users"),
    NavLink("Uploads", "/uploads"),
)
PUBLIC_LINKS: tuple[NavLink, ...] = (NavLink("Login", LOGIN_VIEW),)


def guard_state(session: Session) -> GuardState:
    if session.is_authenticated:
        return GuardState.AUTHENTICATED
    return GuardState.UNAUTHENTICATED


def resolve(session: Session, requested_view: str) -> str | None:
    """Return the view to redirect to, or None to render *requested_view*.

    Anonymous visitors are sent to the login view from anywhere but the
    login view itself. Signed-in visitors asking for the login view go to
    the default view.
    """
    state = guard_state(session)
    if state is GuardState.UNAUTHENTICATED:
        return None if requested_view == LOGIN_VIEW else LOGIN_VIEW
    if requested_view == LOGIN_VIEW:
        return DEFAULT_VIEW
    return None


def navigation(session: Session) -> list[NavLink]:
    """Links shown in the console header for this session."""
    if guard_state(session) is GuardState.AUTHENTICATED:
        return list(PROTECTED_LINKS)
    return list(PUBLIC_LINKS)
