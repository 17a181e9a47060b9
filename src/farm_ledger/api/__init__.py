"""
Farm Ledger API Module.

REST API over the entity registries.
"""

from farm_ledger.api.app import create_app

__all__ = ["create_app"]
