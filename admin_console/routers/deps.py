"""Shared FastAPI dependencies: session lookup, guards, and service wiring."""

from __future__ import annotations

from fastapi import Depends, Request

from admin_console.core.config import settings
from admin_console.core.exceptions import GuardRedirect, UnauthorizedError
from admin_console.repositories.directory import DirectoryRepository
from admin_console.repositories.upload import UploadRepository
from admin_console.services import guard
from admin_console.services.directory import DirectoryService
from admin_console.services.session import Session, SessionRegistry
from admin_console.services.upload import UploadService


def get_registry(request: Request) -> SessionRegistry:
    return request.app.state.sessions


def get_directory_repo(request: Request) -> DirectoryRepository:
    return request.app.state.directory


def get_upload_repo(request: Request) -> UploadRepository:
    return request.app.state.uploads


def get_session(
    request: Request,
    registry: SessionRegistry = Depends(get_registry),
) -> Session:
    """The caller's session, or a fresh logged-out one if the cookie is unknown."""
    token = request.cookies.get(settings.session_cookie_name)
    return registry.get(token) or Session()


def require_session(session: Session = Depends(get_session)) -> Session:
    """API guard: 401 unless the session holds a principal."""
    if not session.is_authenticated:
        raise UnauthorizedError()
    return session


def guarded_view(request: Request, session: Session = Depends(get_session)) -> Session:
    """View guard: redirect instead of rendering when the guard says so."""
    target = guard.resolve(session, request.url.path)
    if target is not None:
        raise GuardRedirect(target)
    return session


# ------------------------------------------------------------------
# Service wiring
# ------------------------------------------------------------------

def build_directory_service(session: Session, repo: DirectoryRepository) -> DirectoryService:
    return DirectoryService(repo, session, settings.page_size)


def build_upload_service(session: Session, repo: UploadRepository) -> UploadService:
    return UploadService(
        repo,
        session,
        allowed_types=settings.allowed_upload_types,
        max_size_bytes=settings.max_upload_size_bytes,
    )


def directory_service(
    session: Session = Depends(require_session),
    repo: DirectoryRepository = Depends(get_directory_repo),
) -> DirectoryService:
    return build_directory_service(session, repo)


def upload_service(
    session: Session = Depends(require_session),
    repo: UploadRepository = Depends(get_upload_repo),
) -> UploadService:
    return build_upload_service(session, repo)
