"""
Farm Ledger Store Module.

Ordered key-value stores the entity registries read and write through.
"""

__all__ = [
    "LedgerStore",
    "MemoryStore",
    "SQLiteStore",
]

from farm_ledger.store.base import LedgerStore
from farm_ledger.store.memory import MemoryStore
from farm_ledger.store.sqlite import SQLiteStore
