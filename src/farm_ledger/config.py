"""
Runtime configuration.

Settings come from FL_* environment variables:
- FL_STORE_BACKEND: "sqlite" (default) or "memory"
- FL_DB_PATH: SQLite database file (default: var/ledger/ledger.db)
- FL_LOG_LEVEL: logging level name (default: INFO)
"""

import logging
import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from farm_ledger.core.exceptions import ConfigurationError
from farm_ledger.store.base import LedgerStore
from farm_ledger.store.memory import MemoryStore
from farm_ledger.store.sqlite import SQLiteStore

StoreBackend = Literal["memory", "sqlite"]

_BACKENDS = ("memory", "sqlite")


class LedgerSettings(BaseModel):
    """Settings for the store and logging."""

    store_backend: StoreBackend = "sqlite"
    db_path: Path = Field(default=SQLiteStore.DEFAULT_DB_PATH)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """
        Load settings from the environment.

        Raises:
            ConfigurationError: If a variable holds an unsupported value
        """
        backend = os.getenv("FL_STORE_BACKEND", "sqlite").strip().lower()
        if backend not in _BACKENDS:
            raise ConfigurationError(
                f"Unsupported store backend: {backend}",
                env_var="FL_STORE_BACKEND",
                value=backend,
                details={"supported": list(_BACKENDS)},
            )

        log_level = os.getenv("FL_LOG_LEVEL", "INFO").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(
                f"Unknown log level: {log_level}",
                env_var="FL_LOG_LEVEL",
                value=log_level,
            )

        return cls(
            store_backend=backend,
            db_path=Path(os.getenv("FL_DB_PATH", str(SQLiteStore.DEFAULT_DB_PATH))),
            log_level=log_level,
        )


def create_store(settings: LedgerSettings | None = None) -> LedgerStore:
    """Build the store selected by the settings."""
    settings = settings or LedgerSettings.from_env()
    if settings.store_backend == "memory":
        return MemoryStore()
    return SQLiteStore(settings.db_path)
