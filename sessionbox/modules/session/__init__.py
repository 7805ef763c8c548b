"""
Session Module - Black Box Interface

Purpose: Keep application code independent of session storage
Interface: configure(), start(), get()/set()/has(), commit(), destroy()
Hidden: Identifier management, persistence, cookie handling

Works with any SessionBackend (native cookie transport, in-memory stub).
"""

from .errors import (
    ErrorKind,
    ErrorReason,
    InvalidArgumentError,
    InvalidStateError,
    SessionError,
    UnknownKeyError,
)
from .session import Session
from .variables import SessionVariable

__all__ = [
    "Session",
    "SessionVariable",
    "SessionError",
    "InvalidStateError",
    "InvalidArgumentError",
    "UnknownKeyError",
    "ErrorKind",
    "ErrorReason",
]
