"""
Session error kinds.

Every failure raised by a Session is a SessionError carrying a kind and a
reason from closed enumerations, so callers can match on the exception
class or on `error.reason`.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Broad category of a session failure."""

    INVALID_STATE = "invalid_state"
    INVALID_ARGUMENT = "invalid_argument"
    UNKNOWN_KEY = "unknown_key"


class ErrorReason(str, Enum):
    """Specific cause of a session failure."""

    ALREADY_STARTED = "already_started"
    NOT_STARTED = "not_started"
    NOT_CONFIGURED = "not_configured"
    EMPTY_NAME = "empty_name"
    EMPTY_DOMAIN = "empty_domain"
    INVALID_PATH = "invalid_path"
    INVALID_LIFETIME = "invalid_lifetime"
    INVALID_FLAG = "invalid_flag"
    INVALID_VALUE = "invalid_value"
    UNKNOWN_KEY = "unknown_key"


class SessionError(Exception):
    """Base class for all session errors."""

    kind: ErrorKind

    def __init__(self, message: str, reason: ErrorReason):
        super().__init__(message)
        self.message = message
        self.reason = reason

    def __str__(self) -> str:
        return self.message


class InvalidStateError(SessionError):
    """Operation attempted in the wrong lifecycle stage."""

    kind = ErrorKind.INVALID_STATE


class InvalidArgumentError(SessionError):
    """A required value is empty or has the wrong type."""

    kind = ErrorKind.INVALID_ARGUMENT


class UnknownKeyError(SessionError, KeyError):
    """Read of a session variable that does not exist."""

    kind = ErrorKind.UNKNOWN_KEY

    def __init__(self, key: Any, message: Optional[str] = None):
        super().__init__(message or f'Unknown session variable "{key}"', ErrorReason.UNKNOWN_KEY)
        self.key = key
