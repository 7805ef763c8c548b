from .provider import (
    BACKEND_KINDS,
    ConfigProvider,
    CookieConfig,
    EnvConfigProvider,
    StaticConfigProvider,
    StoreConfig,
)

__all__ = [
    "BACKEND_KINDS",
    "ConfigProvider",
    "CookieConfig",
    "EnvConfigProvider",
    "StaticConfigProvider",
    "StoreConfig",
]
