"""
Backend Module - Black Box Interface

Purpose: Store session ids and data outside the Session object
Interface: start_session(), get_session_id(), regenerate_session_id(),
           read(), write(), destroy()
Hidden: Cookie handling, id generation, server-side storage

Backends are interchangeable: the native backend for real requests, the
stub for tests that must not touch shared state.
"""

from .factory import BackendFactory
from .interfaces import CookieParams, CookieTransport, SessionBackend, SessionStore
from .native import NativeSessionBackend
from .stub import SessionBackendStub
from .transport import InMemoryCookieTransport, SentCookie, StarletteCookieTransport

__all__ = [
    "BackendFactory",
    "CookieParams",
    "CookieTransport",
    "SessionBackend",
    "SessionStore",
    "NativeSessionBackend",
    "SessionBackendStub",
    "InMemoryCookieTransport",
    "SentCookie",
    "StarletteCookieTransport",
]
