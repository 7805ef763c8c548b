"""
Shared pytest fixtures for sessionbox tests.

This module provides common fixtures including:
- A mocked session backend for Session lifecycle tests
- A mocked sync Redis client for store tests
- In-memory cookie transports and stores for native backend tests
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sessionbox.modules.backend import BackendFactory, InMemoryCookieTransport, SessionBackendStub
from sessionbox.modules.session import Session
from sessionbox.modules.storage import MemorySessionStore

SESSION_NAME = "a-session-name"
SESSION_DOMAIN = "example.com"
SESSION_ID = "a-session-id"


@pytest.fixture(autouse=True)
def reset_backend_factory():
    """Drop the factory's shared store and cached Redis connections."""
    BackendFactory.reset()
    yield
    BackendFactory.reset()


@pytest.fixture
def mock_backend():
    """Create a mock session backend with an empty stored session."""
    backend = MagicMock(spec=SessionBackendStub)
    backend.read.return_value = {}
    backend.get_session_id.return_value = SESSION_ID
    return backend


@pytest.fixture
def session(mock_backend):
    """Create a configured, unstarted Session on the mock backend."""
    session = Session(mock_backend)
    session.configure(SESSION_NAME, SESSION_DOMAIN)
    return session


@pytest.fixture
def started_session(session):
    """Create a started Session on the mock backend."""
    session.start()
    return session


@pytest.fixture
def mock_redis():
    """Create a mock sync Redis client backed by a dict."""
    storage = {}
    redis = MagicMock()
    redis.get.side_effect = lambda key: storage.get(key)
    redis.setex.side_effect = lambda key, ttl, value: storage.__setitem__(key, value)
    redis.delete.side_effect = lambda key: 1 if storage.pop(key, None) is not None else 0
    redis.exists.side_effect = lambda key: 1 if key in storage else 0
    redis.storage = storage
    return redis


@pytest.fixture
def transport():
    """Create a cookie transport without incoming cookies."""
    return InMemoryCookieTransport()


@pytest.fixture
def memory_store():
    """Create an empty memory session store."""
    return MemorySessionStore()
