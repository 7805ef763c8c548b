"""
Cookie transports for the native session backend.

A transport is the explicit handle through which the backend sees the
incoming request cookies and emits response cookies.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from fastapi import Request, Response


class StarletteCookieTransport:
    """Cookie transport over a FastAPI/Starlette request/response pair."""

    def __init__(self, request: Request, response: Response):
        self.request = request
        self.response = response

    def get_cookie(self, name: str) -> Optional[str]:
        return self.request.cookies.get(name)

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
        self._drop_cookie_headers(name)
        self.response.set_cookie(
            key=name,
            value=value,
            max_age=max_age,
            path=path,
            domain=domain,
            secure=secure,
            httponly=httponly,
        )

    def delete_cookie(
        self, name: str, path: str, domain: str, secure: bool, httponly: bool
    ) -> None:
        self._drop_cookie_headers(name)
        self.response.delete_cookie(
            key=name, path=path, domain=domain, secure=secure, httponly=httponly
        )

    def _drop_cookie_headers(self, name: str) -> None:
        """Remove Set-Cookie headers already emitted for `name`."""
        prefix = f"{name}=".encode("latin-1")
        self.response.raw_headers = [
            (key, value)
            for key, value in self.response.raw_headers
            if not (key == b"set-cookie" and value.startswith(prefix))
        ]


@dataclass
class SentCookie:
    """A cookie emitted through an InMemoryCookieTransport."""
    name: str
    value: str
    max_age: Optional[int]
    path: str
    domain: str
    secure: bool
    httponly: bool
    deleted: bool = False


class InMemoryCookieTransport:
    """Cookie transport that records outgoing cookies, for scripts and tests."""

    def __init__(self, incoming: Optional[Dict[str, str]] = None):
        self.incoming: Dict[str, str] = dict(incoming or {})
        self.sent: List[SentCookie] = []

    def get_cookie(self, name: str) -> Optional[str]:
        return self.incoming.get(name)

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
        self.sent.append(SentCookie(name, value, max_age, path, domain, secure, httponly))

    def delete_cookie(
        self, name: str, path: str, domain: str, secure: bool, httponly: bool
    ) -> None:
        self.sent.append(
            SentCookie(name, "", 0, path, domain, secure, httponly, deleted=True)
        )

    def last_cookie(self, name: str) -> Optional[SentCookie]:
        """Return the most recent cookie sent under `name`."""
        for cookie in reversed(self.sent):
            if cookie.name == name:
                return cookie
        return None
