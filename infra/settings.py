"""
Environment-driven configuration.

Values are read from the process environment after loading an optional
``.env`` file from the working directory (python-dotenv).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

STORE_SQLITE = "sqlite"
STORE_REDIS = "redis"
IN_MEMORY_DB = ":memory:"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """
    Server configuration.

    Attributes:
        host: Interface to bind
        port: TCP port to listen on
        store: Persistence backend ("sqlite" or "redis")
        db_path: SQLite database file (None = in-memory database)
        redis_url: Redis connection URL for the redis backend
        log_level: Root log level
        log_json: Emit JSON log lines
        homepage_url: Redirect target for GET /
    """
    host: str = "0.0.0.0"
    port: int = 8080
    store: str = STORE_SQLITE
    db_path: Optional[str] = None
    redis_url: str = "redis://localhost:6379/0"
    log_level: str = "INFO"
    log_json: bool = False
    homepage_url: str = "/_docs"

    def __post_init__(self):
        if self.store not in (STORE_SQLITE, STORE_REDIS):
            raise ValueError(f"Unknown store backend: {self.store!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ`` (skips .env loading)
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        defaults = cls()
        return cls(
            host=environ.get("HOST", defaults.host),
            port=int(environ.get("PORT", defaults.port)),
            store=environ.get("LIFE_STORE", defaults.store).lower(),
            db_path=environ.get("DB_PATH") or None,
            redis_url=environ.get("REDIS_URL", defaults.redis_url),
            log_level=environ.get("LOG_LEVEL", defaults.log_level),
            log_json=environ.get("LOG_JSON", "").lower() in _TRUTHY,
            homepage_url=environ.get("LIFE_HOMEPAGE_URL", defaults.homepage_url),
        )
