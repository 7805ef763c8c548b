"""
In-memory session backend for tests.

Works without any external dependencies and never touches shared state, so
session-based code can be tested in isolation.
"""

import hashlib
import uuid
from typing import Any, Dict, Optional


class SessionBackendStub:
    """Session backend that keeps id and data in memory."""

    def __init__(self):
        self.session_id: Optional[str] = None
        self.data: Dict[str, Any] = {}

    def start_session(
        self, name: str, lifetime: int, path: str, domain: str, secure: bool = False
    ) -> None:
        self.session_id = self._random_id()

    def get_session_id(self) -> Optional[str]:
        return self.session_id

    def regenerate_session_id(self) -> None:
        self.session_id = self._random_id()

    def read(self) -> Dict[str, Any]:
        return dict(self.data)

    def write(self, data: Dict[str, Any]) -> None:
        self.data = dict(data)

    def destroy(self) -> None:
        self.session_id = None
        self.data = {}

    @staticmethod
    def _random_id() -> str:
        return hashlib.md5(uuid.uuid4().bytes).hexdigest()
