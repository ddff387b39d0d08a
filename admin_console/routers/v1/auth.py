"""Login / logout / current-session endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from admin_console.core.config import settings
from admin_console.core.exceptions import AuthFailureError
from admin_console.core.response import DataResponse
from admin_console.routers.deps import get_registry, get_session, require_session
from admin_console.schemas.auth import LoginRequest, NavLinkOut, PrincipalOut, SessionOut
from admin_console.services import guard
from admin_console.services.session import Session, SessionRegistry

router = APIRouter(prefix="/auth", tags=["Auth"])


def _session_out(session: Session) -> SessionOut:
    return SessionOut(
        principal=PrincipalOut.model_validate(session.principal),
        navigation=[NavLinkOut.model_validate(link) for link in guard.navigation(session)],
    )


@router.post("/login", response_model=DataResponse[SessionOut])
async def login(
    body: LoginRequest,
    response: Response,
    session: Session = Depends(get_session),
    registry: SessionRegistry = Depends(get_registry),
):
    """Sign in with one of the demo accounts. Sets the session cookie."""
    if not session.login(body.email, body.password):
        raise AuthFailureError()
    token = registry.register(session)
    response.set_cookie(
        settings.session_cookie_name,
        token,
        httponly=True,
        samesite="lax",
    )
    return {"data": _session_out(session)}


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    session: Session = Depends(get_session),
    registry: SessionRegistry = Depends(get_registry),
):
    """Clear the principal. Always succeeds, signed in or not."""
    session.logout()
    registry.discard(session)
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(settings.session_cookie_name)
    return response


@router.get("/me", response_model=DataResponse[SessionOut])
async def me(session: Session = Depends(require_session)):
    return {"data": _session_out(session)}
