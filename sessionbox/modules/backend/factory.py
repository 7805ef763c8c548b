"""
Backend Factory following Black Box Design principles.

This factory:
- Constructs the session backend based on configuration
- Wires transport and store together
- Returns a configured Session (hiding the backend choice)
"""

import logging
from typing import Any, Dict, Optional

from ...config.provider import BACKEND_KINDS, ConfigProvider
from ..session import Session
from ..storage import MemorySessionStore, RedisSessionStore, StorageModule
from .interfaces import CookieTransport, SessionBackend
from .native import NativeSessionBackend
from .stub import SessionBackendStub

logger = logging.getLogger(__name__)


class BackendFactory:
    """
    Factory for building session backends.

    This is the composition root that:
    - Picks the backend named in the store configuration
    - Creates the store it needs, shared across requests
    - Configures the Session from the cookie configuration
    """

    # Shared between requests so incoming session cookies can be resumed
    _memory_store: Optional[MemorySessionStore] = None
    # Redis connections by URL, one client (and pool) per URL
    _storage_modules: Dict[str, StorageModule] = {}

    @classmethod
    def build(
        cls,
        config_provider: ConfigProvider,
        transport: Optional[CookieTransport] = None,
        redis_client: Optional[Any] = None,
        memory_store: Optional[MemorySessionStore] = None,
    ) -> SessionBackend:
        """
        Build a session backend.

        Args:
            config_provider: Configuration provider
            transport: Cookie transport of the current request (native backends)
            redis_client: Optional Redis client, the shared client for the
                configured URL if missing
            memory_store: Memory store, the factory's shared store if missing

        Returns:
            SessionBackend

        Raises:
            ValueError: Unknown backend, missing transport or invalid store TTL
        """
        store_config = config_provider.get_store_config()

        if store_config.backend not in BACKEND_KINDS:
            raise ValueError(f"Unknown session backend: {store_config.backend}")

        if not store_config.is_native:
            logger.info("Building stub session backend")
            return SessionBackendStub()

        if transport is None:
            raise ValueError(
                f"Session backend '{store_config.backend}' requires a cookie transport"
            )

        if store_config.backend == "redis":
            logger.info("Building native session backend with Redis store")
            if redis_client is None:
                redis_client = cls.storage_module(store_config.redis_url).connect()
            store = RedisSessionStore(redis_client, key_prefix=store_config.key_prefix)
        else:
            logger.info("Building native session backend with memory store")
            store = memory_store if memory_store is not None else cls.shared_memory_store()

        return NativeSessionBackend(transport, store, store_ttl=store_config.ttl)

    @classmethod
    def shared_memory_store(cls) -> MemorySessionStore:
        """Return the memory store shared by all backends built here."""
        if cls._memory_store is None:
            cls._memory_store = MemorySessionStore()
        return cls._memory_store

    @classmethod
    def storage_module(cls, connection_url: Optional[str] = None) -> StorageModule:
        """Return the cached StorageModule for a Redis URL."""
        storage = StorageModule(connection_url)
        cached = cls._storage_modules.get(storage.url)
        if cached is None:
            cls._storage_modules[storage.url] = cached = storage
        return cached

    @classmethod
    def reset(cls) -> None:
        """Close cached Redis connections and drop the shared memory store."""
        for storage in cls._storage_modules.values():
            storage.disconnect()
        cls._storage_modules.clear()
        cls._memory_store = None

    @classmethod
    def build_session(
        cls,
        config_provider: ConfigProvider,
        transport: Optional[CookieTransport] = None,
        redis_client: Optional[Any] = None,
        memory_store: Optional[MemorySessionStore] = None,
    ) -> Session:
        """
        Build a configured, not yet started Session.

        Returns:
            Session bound to the configured backend
        """
        backend = cls.build(
            config_provider,
            transport=transport,
            redis_client=redis_client,
            memory_store=memory_store,
        )

        cookie = config_provider.get_cookie_config()
        session = Session(backend)
        session.configure(
            cookie.name,
            cookie.domain,
            path=cookie.path,
            lifetime=cookie.lifetime,
            secure=cookie.secure,
        )
        return session

    @staticmethod
    def build_for_testing(
        name: str = "test-session", domain: str = "example.com"
    ) -> Session:
        """
        Build a configured Session on the in-memory stub backend.

        Args:
            name: Session name
            domain: Cookie domain

        Returns:
            Session for testing
        """
        session = Session(SessionBackendStub())
        session.configure(name, domain)
        return session
