"""Directory service — listing and admin-only mutations of the user directory.

Every mutation passes through ``authorize``. A non-admin caller gets a
``DENIED`` result and the collection is left exactly as it was.

Rule: No FastAPI here. Pure Python business logic.
"""


import logging

from admin_console.core.exceptions import ValidationError
from admin_console.core.security import Action, authorize
from admin_console.domain.directory import EDITABLE_FIELDS, DirectoryRecord
from admin_console.domain.principal import Role
from admin_console.repositories.directory import DirectoryRepository
from admin_console.services.listing import DirectoryPage
from admin_console.services.outcome import MutationResult, Outcome
from admin_console.services.session import Session

logger = logging.getLogger(__name__)


def _coerce_role(value: str | Role) -> Role:
    try:
        return Role(value)
    except ValueError as exc:
        allowed = ", ".join(r.value for r in Role)
        raise ValidationError(f"Invalid role '{value}'. Expected one of: {allowed}") from exc


class DirectoryService:
    def __init__(self, repo: DirectoryRepository, session: Session, page_size: int):
        self._repo = repo
        self._session = session
        self._page_size = page_size

    def _allowed(self, action: Action) -> bool:
        if authorize(self._session.principal, action):
            return True
        who = self._session.principal.email if self._session.principal else "anonymous"
        logger.warning("Denied %s for %s", action.value, who)
        return False

    @property
    def can_manage(self) -> bool:
        """Whether the console should offer add/edit/delete controls."""
        return authorize(self._session.principal, Action.DIRECTORY_EDIT)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def page(
        self,
        search: str | None = None,
        city: str | None = None,
        page: int | None = None,
    ) -> DirectoryPage:
        state = self._session.directory_view
        state.apply(self._repo.version, search=search, city=city, page=page)
        return state.view(self._repo.list(), self._page_size)

    def cities(self) -> list[str]:
        return self._repo.cities()

    # ------------------------------------------------------------------
    # Write (admin only)
    # ------------------------------------------------------------------

    def add(
        self,
        *,
        name: str,
        email: str,
        company_name: str = "",
        website: str = "",
        city: str = "",
        role: str | Role = Role.VIEWER,
    ) -> MutationResult[DirectoryRecord]:
        if not self._allowed(Action.DIRECTORY_ADD):
            return MutationResult(Outcome.DENIED)
        resolved_role = _coerce_role(role)
        record = DirectoryRecord(
            id=self._repo.next_id(),
            name=name,
            email=email,
            company_name=company_name,
            website=website,
            city=city,
            role=resolved_role,
        )
        self._repo.add(record)
        logger.info("Directory record %s added (%s)", record.id, record.email)
        return MutationResult(Outcome.APPLIED, record)

    def edit(self, record_id: int, field: str, value: str) -> MutationResult[DirectoryRecord]:
        if not self._allowed(Action.DIRECTORY_EDIT):
            return MutationResult(Outcome.DENIED)
        if field not in EDITABLE_FIELDS:
            raise ValidationError(
                f"Field '{field}' is not editable. Expected one of: {', '.join(EDITABLE_FIELDS)}"
            )
        if self._repo.get_by_id(record_id) is None:
            return MutationResult(Outcome.NOT_FOUND)
        new_value = _coerce_role(value) if field == "role" else value
        record = self._repo.update(record_id, **{field: new_value})
        logger.info("Directory record %s: %s updated", record_id, field)
        return MutationResult(Outcome.APPLIED, record)

    def delete(self, record_id: int) -> MutationResult[None]:
        if not self._allowed(Action.DIRECTORY_DELETE):
            return MutationResult(Outcome.DENIED)
        if not self._repo.delete(record_id):
            return MutationResult(Outcome.NOT_FOUND)
        logger.info("Directory record %s deleted", record_id)
        return MutationResult(Outcome.APPLIED)
