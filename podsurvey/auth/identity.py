"""Admin identity: password sign-in and cookie sessions."""

import logging
import secrets
from dataclasses import dataclass
from os import getenv
from typing import Optional

from litestar.connection import ASGIConnection
from litestar.exceptions import NotAuthorizedException
from litestar.handlers.base import BaseRouteHandler
from litestar.stores.base import Store
from litestar.stores.memory import MemoryStore

from podsurvey.errors import AuthenticationError

logger = logging.getLogger("PodSurvey.auth")

ADMIN_EMAIL = getenv("ADMIN_EMAIL", "")
ADMIN_PASSWORD = getenv("ADMIN_PASSWORD", "")
SESSION_COOKIE = "session_id"
SESSION_KEY = "admin_session"
SESSION_TTL = 86400  # 24 hours


@dataclass(frozen=True)
class AdminSession:
    """An authenticated admin session."""
    session_id: str
    email: str


class IdentityProvider:
    """
    Single-account identity backed by a Litestar store.

    There are no roles: a valid session is the only permission.
    """

    def __init__(self, email: str, password: str, store: Optional[Store] = None):
        self.email = email
        self._password = password
        self._store = store or MemoryStore()

    @property
    def configured(self) -> bool:
        return bool(self.email and self._password)

    async def sign_in(self, email: str, password: str) -> str:
        """Check credentials and open a session; returns the new session id."""
        if not self.configured:
            logger.error("Admin credentials not configured")
            raise AuthenticationError("Sign-in is not configured")

        email_ok = secrets.compare_digest(email.strip().lower().encode(), self.email.lower().encode())
        password_ok = secrets.compare_digest(password.encode(), self._password.encode())
        if not (email_ok and password_ok):
            logger.warning(f"Failed sign-in attempt for {email}")
            raise AuthenticationError("Invalid login credentials")

        session_id = secrets.token_urlsafe(32)
        await self._store.set(f"{SESSION_KEY}:{session_id}", self.email, expires_in=SESSION_TTL)
        logger.info(f"Admin signed in: {self.email}")
        return session_id

    async def get_session(self, session_id: Optional[str]) -> Optional[AdminSession]:
        """Return the session for ``session_id``, or None if absent or expired."""
        if not session_id:
            return None
        raw = await self._store.get(f"{SESSION_KEY}:{session_id}")
        if raw is None:
            return None
        # MemoryStore hands values back as bytes
        email = raw.decode("utf-8") if isinstance(raw, bytes) else str(raw)
        return AdminSession(session_id=session_id, email=email)

    async def sign_out(self, session_id: Optional[str]) -> None:
        if not session_id:
            return
        await self._store.delete(f"{SESSION_KEY}:{session_id}")
        logger.info(f"Admin signed out: session_id {session_id[:8]}...")


admin_identity = IdentityProvider(ADMIN_EMAIL, ADMIN_PASSWORD)


async def require_admin_guard(connection: ASGIConnection, handler: BaseRouteHandler) -> None:
    """Guard that rejects requests without a live admin session."""
    session_id = connection.cookies.get(SESSION_COOKIE)
    session = await admin_identity.get_session(session_id)
    if session is None:
        logger.warning(f"Unauthenticated access attempt: {connection.url.path}")
        raise NotAuthorizedException("Not authenticated")
    logger.debug(f"Admin access granted for: {session.email}")
