"""Directory router — listing for every role, mutations for admins only.

A denied mutation leaves the directory untouched and answers 403 with the
message the console shows inline.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from admin_console.core.exceptions import NotFoundError, PermissionDeniedError
from admin_console.core.pagination import ListParams
from admin_console.core.response import DataResponse, paginated
from admin_console.routers.deps import directory_service
from admin_console.schemas.directory import (
    DirectoryListResponse,
    DirectoryRecordCreate,
    DirectoryRecordEdit,
    DirectoryRecordOut,
)
from admin_console.services.directory import DirectoryService
from admin_console.services.listing import DirectoryPage
from admin_console.services.outcome import MutationResult, Outcome

router = APIRouter(prefix="/users", tags=["Users"])

_DENIED = "Only administrators can manage users."


def directory_page_out(svc: DirectoryService, result: DirectoryPage) -> DirectoryListResponse:
    """Shape a derived directory page for the API and the users view."""
    body = paginated(
        [DirectoryRecordOut.model_validate(r) for r in result.rows],
        result.total, result.page, result.page_size,
    )
    return DirectoryListResponse(
        **body,
        filters={"search": result.search, "city": result.city},
        cities=svc.cities(),
        page_buttons=result.page_buttons,
        can_manage=svc.can_manage,
    )


def _unwrap(result: MutationResult, user_id: int | None = None):
    if result.denied:
        raise PermissionDeniedError(_DENIED)
    if result.outcome is Outcome.NOT_FOUND:
        raise NotFoundError("User", user_id)
    return result.value


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=DirectoryListResponse)
async def list_users(
    params: ListParams = Depends(),
    svc: DirectoryService = Depends(directory_service),
):
    """Current page of the directory. Changing `search` or `city` restarts at page 1."""
    result = svc.page(search=params.search, city=params.city, page=params.page)
    return directory_page_out(svc, result)


@router.post("", response_model=DataResponse[DirectoryRecordOut], status_code=status.HTTP_201_CREATED)
async def create_user(
    body: DirectoryRecordCreate,
    svc: DirectoryService = Depends(directory_service),
):
    record = _unwrap(svc.add(**body.model_dump()))
    return {"data": DirectoryRecordOut.model_validate(record)}


@router.patch("/{user_id}", response_model=DataResponse[DirectoryRecordOut])
async def edit_user(
    user_id: int,
    body: DirectoryRecordEdit,
    svc: DirectoryService = Depends(directory_service),
):
    """Replace one field of a user."""
    record = _unwrap(svc.edit(user_id, body.field, body.value), user_id)
    return {"data": DirectoryRecordOut.model_validate(record)}


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    svc: DirectoryService = Depends(directory_service),
):
    _unwrap(svc.delete(user_id), user_id)
