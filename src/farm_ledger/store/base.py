"""
Base class for ordered key-value stores.

Every store backing the ledger must implement get(), put() and scan().
Keys are compared by code point, which matches UTF-8 byte order.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Iterator

from farm_ledger.core.exceptions import StoreError

Entry = tuple[str, bytes]


class LedgerStore(ABC):
    """
    Abstract ordered key-value store.

    Implementations guarantee read-your-writes within a process and
    ascending key order for range scans. Backend faults surface as
    StoreError with the original exception chained.
    """

    backend_name = "abstract"

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """
        Point lookup.

        Returns:
            The stored payload, or None if no value exists at key.
            A zero-length payload is returned as b"", not None.
        """

    @abstractmethod
    def put(self, key: str, value: bytes) -> None:
        """Unconditionally store value at key, replacing any prior value."""

    @abstractmethod
    def scan(self, lo: str, hi: str) -> AbstractContextManager[Iterator[Entry]]:
        """
        Open a scan over the half-open range [lo, hi).

        Use as a context manager; the underlying cursor is released when
        the block exits, whether normally or by exception:

            with store.scan(lo, hi) as entries:
                for key, value in entries:
                    ...
        """

    def ping(self) -> bool:
        """Return True if the store answers a trivial read."""
        try:
            self.get("")
        except StoreError:
            return False
        return True

    def close(self) -> None:
        """Release backend resources. No-op by default."""

    def __enter__(self) -> "LedgerStore":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def _check_payload(self, key: str, value: bytes) -> bytes:
        if not isinstance(value, (bytes, bytearray)):
            raise StoreError(
                f"Payload must be bytes, got {type(value).__name__}",
                operation="put",
                key=key,
                backend=self.backend_name,
            )
        return bytes(value)
