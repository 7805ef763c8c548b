"""
Storage Module - Black Box Interface

Purpose: Persist session data on the server side
Interface: load(), save(), delete(), exists(), StorageModule.connect()
Hidden: Redis specifics, expiry bookkeeping, serialization

Can be replaced with any storage backend without affecting other modules.
"""

import os
from typing import Optional

import redis

from .store import MemorySessionStore, RedisSessionStore, StoredSession


class StorageModule:
    """Black box Redis connection holder."""

    def __init__(self, connection_url: Optional[str] = None):
        """Initialize storage with connection URL."""
        self.url = connection_url or os.getenv("REDIS_URL", "redis://localhost:6379/0")
        self._client = None

    def connect(self) -> redis.Redis:
        """Get storage connection."""
        if not self._client:
            self._client = redis.Redis.from_url(self.url, decode_responses=True)
        return self._client

    def disconnect(self):
        """Close storage connection."""
        if self._client:
            self._client.close()
            self._client = None


__all__ = ["StorageModule", "MemorySessionStore", "RedisSessionStore", "StoredSession"]
