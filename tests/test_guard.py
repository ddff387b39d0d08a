import pytest

from admin_console.services import guard
from admin_console.services.session import Session
from tests.helpers import VIEWER, session_for


@pytest.mark.parametrize("view", ["/dashboard", "/users", "/uploads", "/anything"])
def test_anonymous_visitor_is_sent_to_login(view) -> None:
    assert guard.resolve(Session(), view) == guard.LOGIN_VIEW


def test_anonymous_visitor_may_see_login() -> None:
    assert guard.resolve(Session(), guard.LOGIN_VIEW) is None


@pytest.mark.parametrize("view", ["/dashboard", "/users", "/uploads"])
def test_signed_in_visitor_passes(view) -> None:
    assert guard.resolve(session_for(VIEWER), view) is None


def test_signed_in_visitor_skips_login() -> None:
    assert guard.resolve(session_for(VIEWER), guard.LOGIN_VIEW) == guard.DEFAULT_VIEW


def test_state_follows_login_and_logout() -> None:
    session = Session()
    assert guard.guard_state(session) is guard.GuardState.UNAUTHENTICATED
    session.login(*VIEWER)
    assert guard.guard_state(session) is guard.GuardState.AUTHENTICATED
    session.logout()
    assert guard.guard_state(session) is guard.GuardState.UNAUTHENTICATED
    assert guard.resolve(session, "/users") == guard.LOGIN_VIEW


def test_navigation_depends_on_state() -> None:
    assert [link.href for link in guard.navigation(Session())] == ["/login"]
    assert [link.href for link in guard.navigation(session_for(VIEWER))] == [
        "/dashboard",
        "/users",
        "/uploads",
    ]
