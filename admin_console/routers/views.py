"""Console views: the pages the browser navigates between.

Each view returns the JSON view model its page renders. Every view goes
through ``guarded_view`` first, so an anonymous visitor is redirected to
``/login`` before any protected content is built.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse

from admin_console.core.pagination import ListParams
from admin_console.repositories.directory import DirectoryRepository
from admin_console.repositories.upload import UploadRepository
from admin_console.routers.deps import (
    build_directory_service,
    build_upload_service,
    get_directory_repo,
    get_upload_repo,
    guarded_view,
)
from admin_console.routers.v1.users import directory_page_out
from admin_console.schemas.auth import NavLinkOut, PrincipalOut
from admin_console.schemas.upload import UploadOut
from admin_console.schemas.views import (
    DashboardViewOut,
    LoginViewOut,
    ShellOut,
    UploadsViewOut,
    UsersViewOut,
)
from admin_console.services import guard
from admin_console.services.session import Session
from admin_console.services.upload import UPLOAD_DENIED_MESSAGE

router = APIRouter(tags=["Views"])


def _shell(session: Session) -> ShellOut:
    principal = session.principal
    return ShellOut(
        principal=PrincipalOut.model_validate(principal) if principal else None,
        navigation=[NavLinkOut.model_validate(link) for link in guard.navigation(session)],
    )


@router.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(guard.DEFAULT_VIEW, status_code=status.HTTP_303_SEE_OTHER)


@router.get(guard.LOGIN_VIEW, response_model=LoginViewOut)
async def login_view(session: Session = Depends(guarded_view)):
    return LoginViewOut(shell=_shell(session))


@router.get(guard.DEFAULT_VIEW, response_model=DashboardViewOut)
async def dashboard_view(
    session: Session = Depends(guarded_view),
    directory: DirectoryRepository = Depends(get_directory_repo),
    uploads: UploadRepository = Depends(get_upload_repo),
):
    return DashboardViewOut(
        shell=_shell(session),
        user_count=len(directory),
        upload_count=len(uploads),
    )


@router.get("/users", response_model=UsersViewOut)
async def users_view(
    params: ListParams = Depends(),
    session: Session = Depends(guarded_view),
    repo: DirectoryRepository = Depends(get_directory_repo),
):
    svc = build_directory_service(session, repo)
    result = svc.page(search=params.search, city=params.city, page=params.page)
    return UsersViewOut(shell=_shell(session), directory=directory_page_out(svc, result))


@router.get("/uploads", response_model=UploadsViewOut)
async def uploads_view(
    session: Session = Depends(guarded_view),
    repo: UploadRepository = Depends(get_upload_repo),
):
    svc = build_upload_service(session, repo)
    return UploadsViewOut(
        shell=_shell(session),
        uploads=[UploadOut.model_validate(u) for u in svc.list_uploads()],
        can_upload=svc.can_upload,
        notice=None if svc.can_upload else UPLOAD_DENIED_MESSAGE,
    )
