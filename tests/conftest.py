"""Pytest configuration and fixtures."""

import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from farm_ledger.core.exceptions import StoreError
from farm_ledger.registry.ledger import FarmLedger
from farm_ledger.store.base import LedgerStore
from farm_ledger.store.memory import MemoryStore
from farm_ledger.store.sqlite import SQLiteStore

# Keep tests from touching var/ledger/ledger.db
os.environ.setdefault("FL_STORE_BACKEND", "memory")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def memory_store() -> MemoryStore:
    """Provide an empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def sqlite_store(temp_dir: Path) -> Generator[SQLiteStore, None, None]:
    """Provide an SQLite store in a temporary directory."""
    store = SQLiteStore(temp_dir / "ledger.db")
    yield store
    store.close()


@pytest.fixture(params=["memory", "sqlite"])
def store(request, temp_dir: Path) -> Generator:
    """Provide each store implementation in turn."""
    if request.param == "memory":
        yield MemoryStore()
    else:
        sqlite = SQLiteStore(temp_dir / "ledger.db")
        yield sqlite
        sqlite.close()


@pytest.fixture
def ledger(store) -> FarmLedger:
    """Provide a ledger over each store implementation."""
    return FarmLedger(store)


class FailingStore(LedgerStore):
    """Store whose every operation fails."""

    backend_name = "failing"

    def get(self, key: str) -> bytes | None:
        raise StoreError("read failed", operation="get", key=key)

    def put(self, key: str, value: bytes) -> None:
        raise StoreError("write failed", operation="put", key=key)

    def scan(self, lo: str, hi: str):
        raise StoreError("scan failed", operation="scan", key=lo)


@pytest.fixture
def failing_store() -> FailingStore:
    """Provide a store that raises StoreError on every call."""
    return FailingStore()
