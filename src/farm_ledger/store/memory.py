"""
In-memory ordered key-value store.

Keeps a dict of payloads and a sorted key list so range scans are a pair of
bisections. Used for tests and for running the API without a database file.
"""

import bisect
import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from farm_ledger.store.base import Entry, LedgerStore

logger = logging.getLogger(__name__)


class MemoryStore(LedgerStore):
    """
    Thread-safe in-memory store.

    Scans iterate over a snapshot taken when the scan opens, so writes made
    during iteration are not observed by that scan.
    """

    backend_name = "memory"

    def __init__(self, initial: dict[str, bytes] | None = None):
        """
        Initialize the store.

        Args:
            initial: Optional key -> payload mapping to preload
        """
        self._data: dict[str, bytes] = {}
        self._keys: list[str] = []
        self._lock = threading.RLock()
        self._open_scans = 0
        for key, value in (initial or {}).items():
            self.put(key, value)

    @property
    def open_scans(self) -> int:
        """Number of scans currently open."""
        with self._lock:
            return self._open_scans

    def __len__(self) -> int:
        with self._lock:
            return len(self._keys)

    def get(self, key: str) -> bytes | None:
        with self._lock:
            return self._data.get(key)

    def put(self, key: str, value: bytes) -> None:
        payload = self._check_payload(key, value)
        with self._lock:
            if key not in self._data:
                bisect.insort(self._keys, key)
            self._data[key] = payload

    @contextmanager
    def scan(self, lo: str, hi: str) -> Iterator[Iterator[Entry]]:
        with self._lock:
            start = bisect.bisect_left(self._keys, lo)
            end = bisect.bisect_left(self._keys, hi, lo=start)
            snapshot = [(key, self._data[key]) for key in self._keys[start:end]]
            self._open_scans += 1
        logger.debug("Opened memory scan [%r, %r) with %d entries", lo, hi, len(snapshot))
        try:
            yield iter(snapshot)
        finally:
            with self._lock:
                self._open_scans -= 1
