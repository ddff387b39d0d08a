"""Domain package — plain in-memory entities shared by services and repositories.

Folder intent:
  principal.py  — Role enum + the session Principal
  directory.py  — DirectoryRecord (the user directory rows)
  upload.py     — UploadRecord manifest entries, CandidateFile, rejection outcomes
"""

from admin_console.domain.directory import EDITABLE_FIELDS, DirectoryRecord
from admin_console.domain.principal import Principal, Role
from admin_console.domain.upload import (
    CandidateFile,
    Rejection,
    RejectionReason,
    UploadRecord,
)

__all__ = [
    "CandidateFile",
    "DirectoryRecord",
    "EDITABLE_FIELDS",
    "Principal",
    "Rejection",
    "RejectionReason",
    "Role",
    "UploadRecord",
]
