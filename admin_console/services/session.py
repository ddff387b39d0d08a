"""Session state: the current principal of one browser session.

A ``Session`` is created logged-out and handed to every handler that needs
it. ``SessionRegistry`` keeps the sessions of all browsers apart, keyed by an
opaque random token.
"""


import logging
import secrets

from admin_console.core.security import verify_credentials
from admin_console.domain.principal import Principal
from admin_console.services.listing import ListState

logger = logging.getLogger(__name__)


class Session:
    def __init__(self, token: str | None = None):
        self.token = token
        self.principal: Principal | None = None
        self.directory_view = ListState()

    @property
    def is_authenticated(self) -> bool:
        return self.principal is not None

    def login(self, email: str, password: str) -> bool:
        principal = verify_credentials(email, password)
        if principal is None:
            logger.info("Login rejected for %r", email)
            return False
        self.principal = principal
        self.directory_view = ListState()
        logger.info("Login succeeded for %s (%s)", principal.email, principal.role.value)
        return True

    def logout(self) -> None:
        if self.principal is not None:
            logger.info("Logout for %s", self.principal.email)
        self.principal = None
        self.directory_view = ListState()


class SessionRegistry:
    """Process-wide table of open sessions. Created empty at startup."""

    def __init__(self, max_sessions: int = 1000) -> None:
        self._sessions: dict[str, Session] = {}
        self._max_sessions = max_sessions

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, token: str | None) -> Session | None:
        if not token:
            return None
        return self._sessions.get(token)

    def register(self, session: Session) -> str:
        """Issue *session* a fresh token and track it.

        A token the session already held stops working. When the registry is
        full the oldest session is dropped.
        """
        self.discard(session)
        session.token = secrets.token_urlsafe(32)
        self._sessions[session.token] = session
        while len(self._sessions) > self._max_sessions:
            oldest = next(iter(self._sessions))
            self._sessions.pop(oldest).token = None
            logger.info("Session registry full, dropped the oldest session")
        return session.token

    def discard(self, session: Session) -> None:
        if session.token:
            self._sessions.pop(session.token, None)
