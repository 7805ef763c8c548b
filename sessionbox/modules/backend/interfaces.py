"""Backend interfaces following Black Box Design principles."""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol


class SessionBackend(Protocol):
    """Protocol for session backends - allows swappable implementations."""

    def start_session(
        self, name: str, lifetime: int, path: str, domain: str, secure: bool = False
    ) -> None:
        """
        Start a fresh session context.

        Args:
            name: Session (cookie) name
            lifetime: Cookie lifetime in seconds
            path: Cookie path
            domain: Cookie domain
            secure: Whether the cookie is HTTPS-only
        """
        ...

    def get_session_id(self) -> Optional[str]:
        """Return the current session id, None if no session is active."""
        ...

    def regenerate_session_id(self) -> None:
        """Replace the current session id, invalidating the old one."""
        ...

    def read(self) -> Dict[str, Any]:
        """Return all persisted variables of the current session."""
        ...

    def write(self, data: Dict[str, Any]) -> None:
        """Replace all persisted variables of the current session."""
        ...

    def destroy(self) -> None:
        """Discard the current session id and its data."""
        ...


class CookieTransport(Protocol):
    """Protocol for the hosting environment's cookie transport."""

    def get_cookie(self, name: str) -> Optional[str]:
        """Return the value of an incoming request cookie."""
        ...

    def set_cookie(
        self,
        name: str,
        value: str,
        max_age: Optional[int],
        path: str,
        domain: str,
        secure: bool,
        httponly: bool,
    ) -> None:
        """Send a cookie with the response."""
        ...

    def delete_cookie(
        self, name: str, path: str, domain: str, secure: bool, httponly: bool
    ) -> None:
        """Tell the client to drop a cookie."""
        ...


class SessionStore(Protocol):
    """Protocol for server-side session data stores."""

    def load(self, session_id: str) -> Optional[Dict[str, Any]]:
        """Return stored data, None if the session is unknown or expired."""
        ...

    def save(self, session_id: str, data: Dict[str, Any], ttl: int) -> None:
        """Store data for a session, replacing what was there."""
        ...

    def delete(self, session_id: str) -> None:
        ...

    def exists(self, session_id: str) -> bool:
        ...


@dataclass(frozen=True)
class CookieParams:
    """Session cookie parameters passed to start_session()."""
    name: str
    lifetime: int
    path: str
    domain: str
    secure: bool = False
    httponly: bool = True

    @property
    def max_age(self) -> Optional[int]:
        """Cookie Max-Age, None for a cookie that lasts until the browser closes."""
        return self.lifetime if self.lifetime > 0 else None
