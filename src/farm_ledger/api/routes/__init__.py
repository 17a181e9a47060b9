"""
API route handlers.

This package contains all route definitions for the Farm Ledger API.
"""

from farm_ledger.api.routes import health
from farm_ledger.api.routes.entities import build_entity_router
from farm_ledger.api.schemas.requests import (
    ConsumerRegisterRequest,
    FarmerRegisterRequest,
    ProductRegisterRequest,
    TransactionRecordRequest,
)
from farm_ledger.core.models import EntityKind

farmers = build_entity_router(EntityKind.FARMER, FarmerRegisterRequest)
consumers = build_entity_router(EntityKind.CONSUMER, ConsumerRegisterRequest)
products = build_entity_router(EntityKind.PRODUCT, ProductRegisterRequest)
transactions = build_entity_router(EntityKind.TRANSACTION, TransactionRecordRequest)

__all__ = [
    "build_entity_router",
    "consumers",
    "farmers",
    "health",
    "products",
    "transactions",
]
