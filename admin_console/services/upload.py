"""Upload service — file validation and the in-memory upload manifest.

Each candidate in a batch is validated on its own: a rejected file is
skipped and reported, the rest of the batch is still processed. Only admins
and uploaders may add or remove manifest entries; anyone else gets a
``denied`` batch/result and the manifest does not change.

Rule: No FastAPI here. Pure Python business logic.
"""


import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from admin_console.core.exceptions import PermissionDeniedError, UnauthorizedError
from admin_console.core.security import Action, authorize
from admin_console.domain.principal import Principal
from admin_console.domain.upload import (
    MIB,
    CandidateFile,
    Rejection,
    RejectionReason,
    UploadRecord,
)
from admin_console.repositories.upload import UploadRepository
from admin_console.services.outcome import MutationResult, Outcome
from admin_console.services.session import Session

logger = logging.getLogger(__name__)

UPLOAD_DENIED_MESSAGE = "You do not have permission to upload files."
DELETE_DENIED_MESSAGE = "You do not have permission to delete this file."


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def check_candidate(
    candidate: CandidateFile,
    allowed_types: Iterable[str],
    max_size_bytes: int,
) -> Rejection | None:
    """Return why *candidate* cannot be uploaded, or None if it can.

    Type is checked before size.
    """
    if candidate.mime_type not in set(allowed_types):
        return Rejection(
            file_name=candidate.name,
            reason=RejectionReason.UNSUPPORTED_TYPE,
            message=f'File type of "{candidate.name}" is not allowed.',
        )
    if candidate.size_bytes > max_size_bytes:
        limit_mb = max_size_bytes / MIB
        return Rejection(
            file_name=candidate.name,
            reason=RejectionReason.TOO_LARGE,
            message=f'File "{candidate.name}" exceeds the maximum size of {limit_mb:g} MB.',
        )
    return None


@dataclass
class BatchResult:
    accepted: list[UploadRecord] = field(default_factory=list)
    rejected: list[Rejection] = field(default_factory=list)
    denied: bool = False
    message: str | None = None


class UploadService:
    def __init__(
        self,
        repo: UploadRepository,
        session: Session,
        *,
        allowed_types: Iterable[str],
        max_size_bytes: int,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._repo = repo
        self._session = session
        self._allowed_types = frozenset(allowed_types)
        self._max_size_bytes = max_size_bytes
        self._clock = clock

    @property
    def can_upload(self) -> bool:
        return authorize(self._session.principal, Action.UPLOAD_CREATE)

    def list_uploads(self) -> list[UploadRecord]:
        return self._repo.list()

    def validate(self, candidate: CandidateFile) -> UploadRecord | Rejection:
        """Validate one file; on success stamp and store its manifest entry.

        Raises ``PermissionDeniedError`` for roles that may not upload.
        """
        principal = self._session.principal
        if principal is None:
            raise UnauthorizedError()
        if not authorize(principal, Action.UPLOAD_CREATE):
            logger.warning("Upload denied for %s", principal.email)
            raise PermissionDeniedError(UPLOAD_DENIED_MESSAGE)
        return self._accept(candidate, principal)

    def _accept(self, candidate: CandidateFile, principal: Principal) -> UploadRecord | Rejection:
        rejection = check_candidate(candidate, self._allowed_types, self._max_size_bytes)
        if rejection is not None:
            logger.info("Rejected %r: %s", candidate.name, rejection.reason.value)
            return rejection
        record = UploadRecord(
            id=self._repo.next_id(),
            name=candidate.name,
            size_bytes=candidate.size_bytes,
            mime_type=candidate.mime_type,
            uploaded_at=self._clock(),
            uploader_email=principal.email,
        )
        self._repo.add(record)
        logger.info("Accepted %r (%d bytes) from %s", record.name, record.size_bytes, record.uploader_email)
        return record

    def upload(self, candidates: Iterable[CandidateFile]) -> BatchResult:
        if not authorize(self._session.principal, Action.UPLOAD_CREATE):
            logger.warning("Upload denied for %s", self._who())
            return BatchResult(denied=True, message=UPLOAD_DENIED_MESSAGE)

        result = BatchResult()
        for candidate in candidates:
            outcome = self._accept(candidate, self._session.principal)
            if isinstance(outcome, Rejection):
                result.rejected.append(outcome)
            else:
                result.accepted.append(outcome)
        if result.rejected:
            result.message = " ".join(r.message for r in result.rejected)
        return result

    def delete(self, upload_id: int) -> MutationResult[str]:
        if not authorize(self._session.principal, Action.UPLOAD_DELETE):
            logger.warning("Upload delete denied for %s", self._who())
            return MutationResult(Outcome.DENIED, DELETE_DENIED_MESSAGE)
        if not self._repo.delete(upload_id):
            return MutationResult(Outcome.NOT_FOUND)
        logger.info("Upload %s deleted", upload_id)
        return MutationResult(Outcome.APPLIED)

    def _who(self) -> str:
        return self._session.principal.email if self._session.principal else "anonymous"
