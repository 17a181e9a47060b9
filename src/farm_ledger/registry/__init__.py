"""
Farm Ledger Registry Module.

Generic per-kind entity registries and the ledger facade grouping them.
"""

__all__ = [
    "EntityRegistry",
    "FarmLedger",
]

from farm_ledger.registry.entity import EntityRegistry
from farm_ledger.registry.ledger import FarmLedger
