"""
Typed accessors for session variables.

Applications declare the variables they keep in a session once and use the
accessors instead of raw string keys:

    CURRENT_USER = SessionVariable("user", User)

    if not CURRENT_USER.has(session):
        CURRENT_USER.set(session, User())
    user = CURRENT_USER.get(session)
"""

from typing import Generic, Optional, Type, TypeVar, Union

from .errors import ErrorReason, InvalidArgumentError
from .session import Session

T = TypeVar("T")
D = TypeVar("D")


class SessionVariable(Generic[T]):
    """A named, optionally type-checked session variable."""

    def __init__(self, key: str, value_type: Optional[Type[T]] = None):
        if not key:
            raise ValueError("Session variable key required")
        self.key = key
        self.value_type = value_type

    def get(self, session: Session) -> T:
        return session.get(self.key)

    def get_or(self, session: Session, default: D) -> Union[T, D]:
        """Return the variable, or `default` when it is not set."""
        if not session.has(self.key):
            return default
        return session.get(self.key)

    def set(self, session: Session, value: T) -> None:
        if self.value_type is not None and not isinstance(value, self.value_type):
            raise InvalidArgumentError(
                f'Session variable "{self.key}" expects {self.value_type.__name__}, '
                f"got {type(value).__name__}",
                ErrorReason.INVALID_VALUE,
            )
        session.set(self.key, value)

    def has(self, session: Session) -> bool:
        return session.has(self.key)

    def delete(self, session: Session) -> None:
        session.delete(self.key)

    def __repr__(self) -> str:
        type_name = self.value_type.__name__ if self.value_type else "Any"
        return f"SessionVariable({self.key!r}, {type_name})"
