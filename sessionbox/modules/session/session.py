import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from .errors import ErrorReason, InvalidArgumentError, InvalidStateError, UnknownKeyError

if TYPE_CHECKING:
    from ..backend.interfaces import SessionBackend

logger = logging.getLogger(__name__)


class Session:
    """
    Named key/value store with a configure -> start -> commit/destroy lifecycle.

    The session keeps its variables in memory and delegates everything
    else (identifier management, persistence, cookies) to the backend it
    was constructed with.
    """

    def __init__(self, backend: "SessionBackend"):
        """
        Initialize session.

        Args:
            backend: Backend that stores the session id and data
        """
        self.backend = backend
        self._data: Dict[str, Any] = {}
        self._configured = False
        self._started = False

        self._name = ""
        self._domain = ""
        self._path = "/"
        self._lifetime = 300
        self._secure = False

    def configure(
        self,
        name: str,
        domain: str,
        path: str = "/",
        lifetime: int = 300,
        secure: bool = False,
    ) -> None:
        """
        Configure the session cookie.

        Can be called again to reconfigure until the session is started.

        Args:
            name: Session name, also used as the cookie name
            domain: Cookie domain
            path: Cookie path
            lifetime: Cookie lifetime in seconds (0 = until browser closes)
            secure: Whether the cookie is only sent over HTTPS

        Raises:
            InvalidStateError: Session has already been started
            InvalidArgumentError: A value is empty or has the wrong type
        """
        if self._started:
            raise InvalidStateError(
                "Session has already been started", ErrorReason.ALREADY_STARTED
            )

        if not isinstance(name, str) or name == "":
            raise InvalidArgumentError("Session name required", ErrorReason.EMPTY_NAME)
        if not isinstance(domain, str) or domain == "":
            raise InvalidArgumentError("Session domain required", ErrorReason.EMPTY_DOMAIN)
        if not isinstance(path, str):
            raise InvalidArgumentError("Session path must be a string", ErrorReason.INVALID_PATH)
        # bool is an int subclass
        if isinstance(lifetime, bool) or not isinstance(lifetime, int) or lifetime < 0:
            raise InvalidArgumentError(
                "Session lifetime must be a non-negative integer",
                ErrorReason.INVALID_LIFETIME,
            )
        if not isinstance(secure, bool):
            raise InvalidArgumentError("Secure flag must be a boolean", ErrorReason.INVALID_FLAG)

        self._name = name
        self._domain = domain
        self._path = path
        self._lifetime = lifetime
        self._secure = secure
        self._configured = True

    def start(self) -> None:
        """
        Start the session and load its data from the backend.

        Raises:
            InvalidStateError: Session already started or not configured
        """
        if self._started:
            raise InvalidStateError(
                "Session has already been started", ErrorReason.ALREADY_STARTED
            )
        if not self._configured:
            raise InvalidStateError(
                "Session has not been configured", ErrorReason.NOT_CONFIGURED
            )

        self.backend.start_session(
            self._name, self._lifetime, self._path, self._domain, self._secure
        )
        data = self.backend.read()

        self._data = dict(data or {})
        self._started = True
        logger.debug(
            "Started session %s with %d variable(s)", self._name, len(self._data)
        )

    def is_started(self) -> bool:
        return self._started

    def is_configured(self) -> bool:
        return self._configured

    def get_id(self) -> Optional[str]:
        """Return the session id assigned by the backend."""
        self._ensure_started()
        return self.backend.get_session_id()

    def get_name(self) -> str:
        return self._name

    def regenerate_id(self) -> Optional[str]:
        """
        Replace the session id to prevent session fixation.

        Returns:
            The new session id
        """
        self._ensure_started()
        self.backend.regenerate_session_id()
        session_id = self.get_id()
        logger.info("Regenerated id of session %s: session_id=%s", self._name, session_id)
        return session_id

    def commit(self) -> None:
        """Write all session variables to the backend."""
        self._ensure_started()
        self.backend.write(dict(self._data))

    def destroy(self) -> None:
        """Discard the session in the backend."""
        self._ensure_started()
        self.backend.destroy()
        logger.info("Destroyed session %s", self._name)

    def set(self, key: str, value: Any) -> None:
        self._ensure_started()
        self._data[key] = value

    def get(self, key: str) -> Any:
        """
        Return a session variable.

        Raises:
            InvalidStateError: Session has not been started
            UnknownKeyError: Variable does not exist
        """
        self._ensure_started()
        if key not in self._data:
            raise UnknownKeyError(key)
        return self._data[key]

    def has(self, key: str) -> bool:
        return key in self._data

    def delete(self, key: str) -> None:
        """Remove a session variable; missing variables are ignored."""
        self._ensure_started()
        self._data.pop(key, None)

    def _ensure_started(self) -> None:
        if not self._started:
            raise InvalidStateError("Session has not been started", ErrorReason.NOT_STARTED)
