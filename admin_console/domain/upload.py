"""Upload manifest entries and the outcome types of file validation."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime

MIB = 1024 * 1024


@dataclass(frozen=True)
class CandidateFile:
    """A file offered for upload, described by the facts validation needs."""

    name: str
    size_bytes: int
    mime_type: str


@dataclass(frozen=True)
class UploadRecord:
    """Manifest entry. Never mutated once created."""

    id: int
    name: str
    size_bytes: int
    mime_type: str
    uploaded_at: datetime
    uploader_email: str

    @property
    def size_label(self) -> str:
        return f"{self.size_bytes / MIB:.2f} MB"


class RejectionReason(str, enum.Enum):
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    TOO_LARGE = "TOO_LARGE"


@dataclass(frozen=True)
class Rejection:
    file_name: str
    reason: RejectionReason
    message: str
