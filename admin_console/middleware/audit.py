"""Audit logging middleware — records every state-changing request to the audit log."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from admin_console.core.config import settings

audit_logger = logging.getLogger("admin_console.audit")

# Methods that mutate state
_WRITE_METHODS = {"POST", "PUT", "PATCH", "DELETE"}

class AuditMiddleware(BaseHTTPMiddleware):
    """Logs all write operations with the acting principal.

    The principal is looked up before the request runs, so a logout is
    attributed to the user who logged out. Failures while building the audit
    line are logged and never raise to the caller.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method not in _WRITE_METHODS:
            return await call_next(request)

        actor = self._actor(request)
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        audit_logger.info(
            "%s %s -> %s (%dms) by %s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            actor,
        )
        return response

    @staticmethod
    def _actor(request: Request) -> str:
        try:
            registry = request.app.state.sessions
            session = registry.get(request.cookies.get(settings.session_cookie_name))
        except AttributeError:
            audit_logger.exception("Audit middleware could not read the session registry")
            return "unknown"
        if session is None or session.principal is None:
            return "anonymous"
        return session.principal.email
