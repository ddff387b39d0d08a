"""Session principal and the roles a principal can hold."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Role(str, enum.Enum):
    ADMIN = "admin"
    UPLOADER = "uploader"
    VIEWER = "viewer"


@dataclass(frozen=True)
class Principal:
    """The authenticated user of a session. Exists only while logged in."""

    email: str
    role: Role
