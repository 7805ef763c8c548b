"""
Native session backend.

Uses the hosting environment's cookie transport for the session id and a
server-side SessionStore for the data.
"""

import logging
import secrets
from typing import Any, Dict, Optional

from .interfaces import CookieParams, CookieTransport, SessionStore

logger = logging.getLogger(__name__)

# Store TTL for browser-session cookies (lifetime 0)
DEFAULT_STORE_TTL = 1440


class NativeSessionBackend:
    """Session backend on top of a cookie transport and a session store."""

    def __init__(
        self,
        transport: CookieTransport,
        store: SessionStore,
        store_ttl: int = DEFAULT_STORE_TTL,
    ):
        """
        Initialize backend.

        Args:
            transport: Cookie transport of the current request
            store: Server-side session data store
            store_ttl: Store TTL in seconds used when the cookie lifetime is 0

        Raises:
            ValueError: store_ttl is not positive
        """
        if store_ttl <= 0:
            raise ValueError(f"store_ttl must be a positive number of seconds, got {store_ttl}")

        self.transport = transport
        self.store = store
        self.store_ttl = store_ttl

        self._cookie: Optional[CookieParams] = None
        self._session_id: Optional[str] = None
        self._data: Dict[str, Any] = {}

    def start_session(
        self, name: str, lifetime: int, path: str, domain: str, secure: bool = False
    ) -> None:
        """
        Start a session.

        Logic:
        1. Resume the session named by the incoming cookie if the store knows it
        2. Otherwise create a new, empty session (unknown ids are not adopted)
        3. Send the session cookie
        """
        self._cookie = CookieParams(
            name=name, lifetime=lifetime, path=path, domain=domain, secure=secure
        )

        incoming_id = self.transport.get_cookie(name)
        if incoming_id and self.store.exists(incoming_id):
            self._session_id = incoming_id
            self._data = self.store.load(incoming_id) or {}
            logger.debug("Resumed session %s: session_id=%s", name, incoming_id)
        else:
            self._session_id = self._generate_id()
            self._data = {}
            self.store.save(self._session_id, self._data, self._store_ttl(self._cookie))
            logger.debug("Created session %s: session_id=%s", name, self._session_id)

        self._send_cookie()

    def get_session_id(self) -> Optional[str]:
        return self._session_id

    def regenerate_session_id(self) -> None:
        """Move the session data to a new id and delete the old one."""
        cookie = self._ensure_started()
        old_id = self._session_id

        self._session_id = self._generate_id()
        self.store.save(self._session_id, self._data, self._store_ttl(cookie))
        self.store.delete(old_id)

        self._send_cookie()

    def read(self) -> Dict[str, Any]:
        self._ensure_started()
        return dict(self._data)

    def write(self, data: Dict[str, Any]) -> None:
        cookie = self._ensure_started()
        self._data = dict(data)
        self.store.save(self._session_id, self._data, self._store_ttl(cookie))

    def destroy(self) -> None:
        """Expire the session cookie and delete the stored data."""
        cookie = self._ensure_started()

        self.transport.delete_cookie(
            cookie.name,
            path=cookie.path,
            domain=cookie.domain,
            secure=cookie.secure,
            httponly=cookie.httponly,
        )
        self.store.delete(self._session_id)
        logger.debug("Destroyed session %s: session_id=%s", cookie.name, self._session_id)

        self._session_id = None
        self._data = {}

    def _send_cookie(self) -> None:
        cookie = self._cookie
        self.transport.set_cookie(
            cookie.name,
            self._session_id,
            max_age=cookie.max_age,
            path=cookie.path,
            domain=cookie.domain,
            secure=cookie.secure,
            httponly=cookie.httponly,
        )

    def _store_ttl(self, cookie: CookieParams) -> int:
        return cookie.max_age or self.store_ttl

    def _ensure_started(self) -> CookieParams:
        if self._cookie is None or self._session_id is None:
            raise RuntimeError("Session not started. Call start_session() first.")
        return self._cookie

    @staticmethod
    def _generate_id() -> str:
        return secrets.token_urlsafe(32)
