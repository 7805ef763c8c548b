"""
Server-side session stores.

Both stores keep a StoredSession record per session id and honour the TTL
passed to save(): expired memory records and expired Redis keys read as
absent.
"""

import logging
import time
from datetime import UTC, datetime
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class StoredSession(BaseModel):
    """Persisted session record."""

    session_id: str = Field(..., min_length=1, description="Session identifier")
    data: Dict[str, Any] = Field(default_factory=dict, description="Session variables")
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class MemorySessionStore:
    """Process-local session store."""

    def __init__(self):
        # session_id -> (record, expires_at as time.monotonic())
        self._records: Dict[str, Tuple[StoredSession, float]] = {}

    def load(self, session_id: str) -> Optional[Dict[str, Any]]:
        record = self._get(session_id)
        if record is None:
            return None
        return dict(record.data)

    def save(self, session_id: str, data: Dict[str, Any], ttl: int) -> None:
        existing = self._get(session_id)
        record = StoredSession(session_id=session_id, data=dict(data))
        if existing is not None:
            record.created_at = existing.created_at
        self._records[session_id] = (record, time.monotonic() + ttl)

    def delete(self, session_id: str) -> None:
        self._records.pop(session_id, None)

    def exists(self, session_id: str) -> bool:
        return self._get(session_id) is not None

    def __len__(self) -> int:
        return sum(1 for session_id in list(self._records) if self._get(session_id) is not None)

    def _get(self, session_id: str) -> Optional[StoredSession]:
        entry = self._records.get(session_id)
        if entry is None:
            return None

        record, expires_at = entry
        if time.monotonic() >= expires_at:
            del self._records[session_id]
            return None
        return record


class RedisSessionStore:
    """
    Redis-backed session store.

    Records are stored as StoredSession JSON under `<key_prefix><session_id>`
    with SETEX, so Redis expires them. Session values must be
    JSON-serializable.
    """

    def __init__(self, redis_client, key_prefix: str = "session:"):
        """
        Initialize store.

        Args:
            redis_client: Sync Redis client (decode_responses=True)
            key_prefix: Prefix for session keys
        """
        self.redis = redis_client
        self.key_prefix = key_prefix

    def load(self, session_id: str) -> Optional[Dict[str, Any]]:
        record = self._get(session_id)
        if record is None:
            return None
        return record.data

    def save(self, session_id: str, data: Dict[str, Any], ttl: int) -> None:
        record = StoredSession(session_id=session_id, data=dict(data))

        existing = self._get(session_id)
        if existing is not None:
            record.created_at = existing.created_at

        self.redis.setex(self._key(session_id), ttl, record.model_dump_json())

    def delete(self, session_id: str) -> None:
        self.redis.delete(self._key(session_id))

    def exists(self, session_id: str) -> bool:
        return self.redis.exists(self._key(session_id)) > 0

    def _get(self, session_id: str) -> Optional[StoredSession]:
        raw = self.redis.get(self._key(session_id))
        if not raw:
            return None
        return StoredSession.model_validate_json(raw)

    def _key(self, session_id: str) -> str:
        return f"{self.key_prefix}{session_id}"
