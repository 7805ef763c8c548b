"""
Unit tests for the Storage Module.

Tests cover:
- StoredSession record serialization
- MemorySessionStore load/save/delete and expiry
- RedisSessionStore operations against a mocked Redis client
- StorageModule connection handling
"""

import json
from datetime import datetime
from unittest.mock import MagicMock, patch

import pytest

from sessionbox.modules.storage import (
    MemorySessionStore,
    RedisSessionStore,
    StorageModule,
    StoredSession,
)


# =============================================================================
# StoredSession
# =============================================================================


class TestStoredSession:
    def test_defaults(self):
        record = StoredSession(session_id="abc")
        assert record.data == {}
        assert isinstance(record.created_at, datetime)
        assert record.created_at.tzinfo is not None

    def test_json_round_trip_keeps_timestamps(self):
        record = StoredSession(session_id="abc", data={"foo": [1, 2]})
        restored = StoredSession.model_validate_json(record.model_dump_json())
        assert restored == record

    def test_empty_session_id_rejected(self):
        with pytest.raises(ValueError):
            StoredSession(session_id="")


# =============================================================================
# MemorySessionStore
# =============================================================================


class TestMemorySessionStore:
    def test_load_unknown_session(self, memory_store):
        assert memory_store.load("missing") is None
        assert memory_store.exists("missing") is False

    def test_save_and_load(self, memory_store):
        memory_store.save("abc", {"foo": "a-foo"}, ttl=300)

        assert memory_store.exists("abc") is True
        assert memory_store.load("abc") == {"foo": "a-foo"}
        assert len(memory_store) == 1

    def test_load_returns_a_copy(self, memory_store):
        memory_store.save("abc", {"foo": "a-foo"}, ttl=300)
        memory_store.load("abc")["foo"] = "changed"
        assert memory_store.load("abc") == {"foo": "a-foo"}

    def test_delete(self, memory_store):
        memory_store.save("abc", {"foo": "a-foo"}, ttl=300)
        memory_store.delete("abc")
        memory_store.delete("abc")

        assert memory_store.exists("abc") is False

    def test_expired_session_reads_as_absent(self, memory_store):
        with patch("sessionbox.modules.storage.store.time.monotonic", return_value=1000.0):
            memory_store.save("abc", {"foo": "a-foo"}, ttl=300)

        with patch("sessionbox.modules.storage.store.time.monotonic", return_value=1299.0):
            assert memory_store.exists("abc") is True

        with patch("sessionbox.modules.storage.store.time.monotonic", return_value=1300.0):
            assert memory_store.load("abc") is None
            assert len(memory_store) == 0

    def test_save_keeps_created_at(self, memory_store):
        memory_store.save("abc", {}, ttl=300)
        created_at = memory_store._get("abc").created_at

        memory_store.save("abc", {"foo": "a-foo"}, ttl=300)

        assert memory_store._get("abc").created_at == created_at


# =============================================================================
# RedisSessionStore
# =============================================================================


class TestRedisSessionStore:
    @pytest.fixture
    def store(self, mock_redis):
        return RedisSessionStore(mock_redis, key_prefix="test:")

    def test_save_uses_setex_with_ttl(self, store, mock_redis):
        store.save("abc", {"foo": "a-foo"}, ttl=300)

        key, ttl, value = mock_redis.setex.call_args[0]
        assert key == "test:abc"
        assert ttl == 300
        stored = json.loads(value)
        assert stored["session_id"] == "abc"
        assert stored["data"] == {"foo": "a-foo"}

    def test_load(self, store):
        store.save("abc", {"foo": "a-foo", "count": 2}, ttl=300)
        assert store.load("abc") == {"foo": "a-foo", "count": 2}

    def test_load_unknown_session(self, store, mock_redis):
        assert store.load("missing") is None
        mock_redis.get.assert_called_with("test:missing")

    def test_exists(self, store):
        assert store.exists("abc") is False
        store.save("abc", {}, ttl=300)
        assert store.exists("abc") is True

    def test_delete(self, store, mock_redis):
        store.save("abc", {}, ttl=300)
        store.delete("abc")

        mock_redis.delete.assert_called_once_with("test:abc")
        assert store.exists("abc") is False

    def test_save_keeps_created_at(self, store, mock_redis):
        store.save("abc", {}, ttl=300)
        created_at = json.loads(mock_redis.storage["test:abc"])["created_at"]

        store.save("abc", {"foo": "a-foo"}, ttl=300)

        assert json.loads(mock_redis.storage["test:abc"])["created_at"] == created_at

    def test_default_key_prefix(self, mock_redis):
        RedisSessionStore(mock_redis).save("abc", {}, ttl=60)
        assert "session:abc" in mock_redis.storage


# =============================================================================
# StorageModule
# =============================================================================


class TestStorageModule:
    def test_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("REDIS_URL", "redis://redis.internal:6379/2")
        assert StorageModule().url == "redis://redis.internal:6379/2"

    def test_default_url(self, monkeypatch):
        monkeypatch.delenv("REDIS_URL", raising=False)
        assert StorageModule().url == "redis://localhost:6379/0"

    def test_connect_creates_client_once(self):
        client = MagicMock()
        with patch(
            "sessionbox.modules.storage.redis.Redis.from_url", return_value=client
        ) as from_url:
            storage = StorageModule("redis://localhost:6379/1")
            assert storage.connect() is client
            assert storage.connect() is client

        from_url.assert_called_once_with("redis://localhost:6379/1", decode_responses=True)

    def test_disconnect_closes_client(self):
        client = MagicMock()
        with patch("sessionbox.modules.storage.redis.Redis.from_url", return_value=client):
            storage = StorageModule("redis://localhost:6379/1")
            storage.connect()
            storage.disconnect()

        client.close.assert_called_once_with()
        assert storage._client is None
