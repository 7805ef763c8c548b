"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Optional, Protocol

BACKEND_KINDS = ("stub", "memory", "redis")


@dataclass
class CookieConfig:
    """Session cookie configuration."""
    name: str
    domain: str
    path: str = "/"
    lifetime: int = 300
    secure: bool = False


@dataclass
class StoreConfig:
    """Session backend and store configuration."""
    backend: str = "memory"
    redis_url: Optional[str] = None
    key_prefix: str = "session:"
    ttl: int = 1440

    @property
    def is_native(self) -> bool:
        """Check if the backend needs a cookie transport."""
        return self.backend in ("memory", "redis")


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_cookie_config(self) -> CookieConfig:
        """Get session cookie configuration."""
        ...

    def get_store_config(self) -> StoreConfig:
        """Get backend and store configuration."""
        ...


class StaticConfigProvider:
    """Configuration provider with fixed values, for tests and scripts."""

    def __init__(self, cookie: CookieConfig, store: Optional[StoreConfig] = None):
        self.cookie = cookie
        self.store = store or StoreConfig()

    def get_cookie_config(self) -> CookieConfig:
        return self.cookie

    def get_store_config(self) -> StoreConfig:
        return self.store


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_cookie_config(self) -> CookieConfig:
        """Get session cookie configuration from environment variables."""
        domain = os.getenv("SESSION_COOKIE_DOMAIN")
        if not domain:
            raise ValueError(
                "SESSION_COOKIE_DOMAIN environment variable is required. "
                "Example: SESSION_COOKIE_DOMAIN=.example.com"
            )

        return CookieConfig(
            name=os.getenv("SESSION_NAME", "SESSIONID"),
            domain=domain,
            path=os.getenv("SESSION_COOKIE_PATH", "/"),
            lifetime=_int_env("SESSION_COOKIE_LIFETIME", "300"),
            secure=os.getenv("SESSION_COOKIE_SECURE", "false").lower() == "true",
        )

    def get_store_config(self) -> StoreConfig:
        """Get backend and store configuration from environment variables."""
        backend = os.getenv("SESSION_BACKEND", "memory").lower()
        if backend not in BACKEND_KINDS:
            raise ValueError(
                f"SESSION_BACKEND must be one of {', '.join(BACKEND_KINDS)}, got '{backend}'"
            )

        ttl = _int_env("SESSION_STORE_TTL", "1440")
        if ttl <= 0:
            raise ValueError(f"SESSION_STORE_TTL must be a positive integer, got '{ttl}'")

        return StoreConfig(
            backend=backend,
            redis_url=os.getenv("REDIS_URL"),
            key_prefix=os.getenv("SESSION_KEY_PREFIX", "session:"),
            ttl=ttl,
        )


def _int_env(name: str, default: str) -> int:
    value = os.getenv(name, default)
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{value}'") from None
