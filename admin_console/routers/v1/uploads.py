"""Upload endpoints — thin HTTP layer.

Business logic lives in :mod:`admin_console.services.upload`. This router
reads each multipart file only to measure it; the bytes are discarded.
"""


from fastapi import APIRouter, Depends, File, UploadFile, status

from admin_console.core.exceptions import NotFoundError, PermissionDeniedError
from admin_console.core.response import DataResponse
from admin_console.domain.upload import CandidateFile
from admin_console.routers.deps import upload_service
from admin_console.schemas.upload import RejectionOut, UploadBatchOut, UploadOut
from admin_console.services.outcome import Outcome
from admin_console.services.upload import UploadService

router = APIRouter(prefix="/uploads", tags=["Uploads"])


async def _describe(file: UploadFile) -> CandidateFile:
    """Measure an uploaded file and drop its contents."""
    size = 0
    while chunk := await file.read(64 * 1024):
        size += len(chunk)
    await file.close()
    return CandidateFile(
        name=file.filename or "unnamed",
        size_bytes=size,
        mime_type=file.content_type or "application/octet-stream",
    )


@router.get("", response_model=DataResponse[list[UploadOut]])
async def list_uploads(svc: UploadService = Depends(upload_service)):
    return {"data": [UploadOut.model_validate(u) for u in svc.list_uploads()]}


@router.post("", response_model=DataResponse[UploadBatchOut])
async def upload_files(
    files: list[UploadFile] = File(...),
    svc: UploadService = Depends(upload_service),
):
    """Validate every file of the batch independently and report each rejection."""
    candidates = [await _describe(f) for f in files]
    result = svc.upload(candidates)
    if result.denied:
        raise PermissionDeniedError(result.message)
    return {
        "data": UploadBatchOut(
            accepted=[UploadOut.model_validate(u) for u in result.accepted],
            rejected=[RejectionOut.model_validate(r) for r in result.rejected],
            message=result.message,
        )
    }


@router.delete("/{upload_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_upload(
    upload_id: int,
    svc: UploadService = Depends(upload_service),
):
    result = svc.delete(upload_id)
    if result.denied:
        raise PermissionDeniedError(result.value)
    if result.outcome is Outcome.NOT_FOUND:
        raise NotFoundError("Upload", upload_id)
