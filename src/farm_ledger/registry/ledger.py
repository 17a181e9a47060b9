"""
Farm Ledger facade.

Groups the four entity registries over one store and exposes the
per-kind register/get/list operations.
"""

from farm_ledger.core.models import (
    CONSUMER_SCHEMA,
    FARMER_SCHEMA,
    PRODUCT_SCHEMA,
    TRANSACTION_SCHEMA,
    Consumer,
    EntityKind,
    Farmer,
    Product,
    Transaction,
)
from farm_ledger.registry.entity import EntityRegistry
from farm_ledger.store.base import LedgerStore


class FarmLedger:
    """
    Registry facade for farmers, consumers, products and transactions.

    Foreign-key fields (farmer_id, consumer_id) are stored as given and are
    not checked against the registry.
    """

    def __init__(self, store: LedgerStore):
        """
        Initialize the ledger.

        Args:
            store: Ordered key-value store shared by all registries
        """
        self._store = store
        self.farmers: EntityRegistry[Farmer] = EntityRegistry(store, FARMER_SCHEMA)
        self.consumers: EntityRegistry[Consumer] = EntityRegistry(store, CONSUMER_SCHEMA)
        self.products: EntityRegistry[Product] = EntityRegistry(store, PRODUCT_SCHEMA)
        self.transactions: EntityRegistry[Transaction] = EntityRegistry(
            store, TRANSACTION_SCHEMA
        )
        self._registries: dict[EntityKind, EntityRegistry] = {
            EntityKind.FARMER: self.farmers,
            EntityKind.CONSUMER: self.consumers,
            EntityKind.PRODUCT: self.products,
            EntityKind.TRANSACTION: self.transactions,
        }

    @property
    def store(self) -> LedgerStore:
        return self._store

    def registry_for(self, kind: EntityKind | str) -> EntityRegistry:
        """Return the registry serving an entity kind."""
        return self._registries[EntityKind(kind)]

    # Farmers

    def register_farmer(
        self,
        entity_id: str,
        name: str,
        email: str | None = None,
        location: str | None = None,
    ) -> Farmer:
        """
        Register a farmer under farmer-<entity_id>.

        Raises:
            RecordEncodeError: If neither email nor location is given
        """
        return self.farmers.register(entity_id, name=name, email=email, location=location)

    def get_farmer(self, entity_id: str) -> Farmer:
        return self.farmers.get(entity_id)

    def list_farmers(self) -> list[Farmer]:
        return self.farmers.list_all()

    # Consumers

    def register_consumer(self, entity_id: str, name: str, location: str) -> Consumer:
        """Register a consumer under consumer-<entity_id>."""
        return self.consumers.register(entity_id, name=name, location=location)

    def get_consumer(self, entity_id: str) -> Consumer:
        return self.consumers.get(entity_id)

    def list_consumers(self) -> list[Consumer]:
        return self.consumers.list_all()

    # Products

    def register_product(
        self, entity_id: str, farmer_id: str, name: str, price: str
    ) -> Product:
        """Register a product under product-<entity_id>. Price is decimal text."""
        return self.products.register(entity_id, farmer_id=farmer_id, name=name, price=price)

    def get_product(self, entity_id: str) -> Product:
        return self.products.get(entity_id)

    def list_products(self) -> list[Product]:
        return self.products.list_all()

    # Transactions

    def record_transaction(
        self,
        entity_id: str,
        farmer_id: str,
        consumer_id: str,
        amount: str,
        timestamp: str,
    ) -> Transaction:
        """Record a transaction under transaction-<entity_id>."""
        return self.transactions.register(
            entity_id,
            farmer_id=farmer_id,
            consumer_id=consumer_id,
            amount=amount,
            timestamp=timestamp,
        )

    register_transaction = record_transaction

    def get_transaction(self, entity_id: str) -> Transaction:
        return self.transactions.get(entity_id)

    def list_transactions(self) -> list[Transaction]:
        return self.transactions.list_all()
