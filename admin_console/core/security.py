"""Roles, demo credentials, and the single capability check.

The role model only decides what the console offers to the current
principal. It is not a security boundary: every account is a fixed demo
account and every collection lives in process memory.
"""

from __future__ import annotations

import enum
import hmac
from dataclasses import dataclass

from admin_console.domain.principal import Principal, Role


class Action(str, enum.Enum):
    DIRECTORY_ADD = "directory:add"
    DIRECTORY_EDIT = "directory:edit"
    DIRECTORY_DELETE = "directory:delete"
    UPLOAD_CREATE = "upload:create"
    UPLOAD_DELETE = "upload:delete"


_ADMIN_ONLY = frozenset({Role.ADMIN})
_UPLOADERS = frozenset({Role.ADMIN, Role.UPLOADER})

# Which roles may perform each action. Viewing is open to every principal.
PERMISSIONS: dict[Action, frozenset[Role]] = {
    Action.DIRECTORY_ADD: _ADMIN_ONLY,
    Action.DIRECTORY_EDIT: _ADMIN_ONLY,
    Action.DIRECTORY_DELETE: _ADMIN_ONLY,
    Action.UPLOAD_CREATE: _UPLOADERS,
    Action.UPLOAD_DELETE: _UPLOADERS,
}


def authorize(principal: Principal | None, action: Action) -> bool:
    """Return True when *principal* may perform *action*."""
    if principal is None:
        return False
    return principal.role in PERMISSIONS.get(action, frozenset())


@dataclass(frozen=True)
class DemoAccount:
    email: str
    password: str
    role: Role


DEMO_ACCOUNTS: tuple[DemoAccount, ...] = (
    DemoAccount("admin@example.com", "admin123", Role.ADMIN),
    DemoAccount("uploader@example.com", "uploader123", Role.UPLOADER),
    DemoAccount("viewer@example.com", "viewer123", Role.VIEWER),
)


def verify_credentials(email: str, password: str) -> Principal | None:
    """Match *email*/*password* against the demo accounts."""
    normalized = (email or "").strip().lower()
    for account in DEMO_ACCOUNTS:
        if account.email == normalized and hmac.compare_digest(
            account.password.encode(), (password or "").encode()
        ):
            return Principal(email=account.email, role=account.role)
    return None
