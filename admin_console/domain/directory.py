"""In-memory model for directory users.

Records are keyed by an integer id that is unique and stable for the
record's lifetime. Edits mutate the record in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from admin_console.domain.principal import Role

# Fields an admin may replace through an edit
EDITABLE_FIELDS: tuple[str, ...] = (
    "name",
    "email",
    "company_name",
    "website",
    "city",
    "role",
)


@dataclass
class DirectoryRecord:
    id: int
    name: str
    email: str
    company_name: str = ""
    website: str = ""
    city: str = ""
    role: Role = field(default=Role.VIEWER)
