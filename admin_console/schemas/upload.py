"""Upload schemas."""


from datetime import datetime

from admin_console.domain.upload import RejectionReason
from admin_console.schemas.common import CamelModel

class UploadOut(CamelModel):
    id: int
    name: str
    size_bytes: int
    size_label: str
    mime_type: str
    uploaded_at: datetime
    uploader_email: str

class RejectionOut(CamelModel):
    file_name: str
    reason: RejectionReason
    message: str

class UploadBatchOut(CamelModel):
    accepted: list[UploadOut]
    rejected: list[RejectionOut]
    message: str | None = None
