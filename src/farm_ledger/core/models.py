"""
Entity record models and their payload codec.

Records are stored as field-named JSON. Every attribute is text, including
price and amount, and the ``id`` field carries the full prefixed key.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError, model_validator
from pydantic_core import PydanticSerializationError

from farm_ledger.core.exceptions import RecordDecodeError, RecordEncodeError
from farm_ledger.core.keys import (
    CONSUMER_PREFIX,
    FARMER_PREFIX,
    PRODUCT_PREFIX,
    TRANSACTION_PREFIX,
)


class EntityKind(str, Enum):
    """Kinds of entity held in the ledger."""

    FARMER = "farmer"
    CONSUMER = "consumer"
    PRODUCT = "product"
    TRANSACTION = "transaction"


class LedgerRecord(BaseModel):
    """Base for all stored records."""

    id: str

    model_config = {"extra": "forbid"}


class Farmer(LedgerRecord):
    """
    A registered farmer.

    At least one of email or location must be set; the unset one is omitted
    from the payload.
    """

    name: str
    email: str | None = None
    location: str | None = None

    @model_validator(mode="after")
    def require_contact_field(self) -> "Farmer":
        """Reject farmers with neither email nor location."""
        if self.email is None and self.location is None:
            raise ValueError("Farmer requires at least one of email or location")
        return self


class Consumer(LedgerRecord):
    """A registered consumer."""

    name: str
    location: str


class Product(LedgerRecord):
    """A product offered by a farmer. Price is decimal text, e.g. "3.50"."""

    farmer_id: str
    name: str
    price: str


class Transaction(LedgerRecord):
    """A sale between a farmer and a consumer."""

    farmer_id: str
    consumer_id: str
    amount: str
    timestamp: str


RecordT = TypeVar("RecordT", bound=LedgerRecord)


@dataclass(frozen=True)
class EntitySchema(Generic[RecordT]):
    """Binds an entity kind to its key prefix and record model."""

    kind: EntityKind
    prefix: str
    model: type[RecordT]

    @property
    def attributes(self) -> tuple[str, ...]:
        """Attribute names a caller supplies at registration (everything but id)."""
        return tuple(name for name in self.model.model_fields if name != "id")


FARMER_SCHEMA = EntitySchema(EntityKind.FARMER, FARMER_PREFIX, Farmer)
CONSUMER_SCHEMA = EntitySchema(EntityKind.CONSUMER, CONSUMER_PREFIX, Consumer)
PRODUCT_SCHEMA = EntitySchema(EntityKind.PRODUCT, PRODUCT_PREFIX, Product)
TRANSACTION_SCHEMA = EntitySchema(EntityKind.TRANSACTION, TRANSACTION_PREFIX, Transaction)

ENTITY_SCHEMAS: dict[EntityKind, EntitySchema] = {
    schema.kind: schema
    for schema in (FARMER_SCHEMA, CONSUMER_SCHEMA, PRODUCT_SCHEMA, TRANSACTION_SCHEMA)
}


def validation_messages(exc: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
        for err in exc.errors()
    ]


def encode_record(record: LedgerRecord, *, entity_type: str | None = None) -> bytes:
    """
    Serialize a record to its stored payload.

    Raises:
        RecordEncodeError: If the record cannot be serialized
    """
    try:
        return record.model_dump_json(exclude_none=True).encode("utf-8")
    except (PydanticSerializationError, ValueError) as exc:
        raise RecordEncodeError(
            f"Failed to encode {type(record).__name__} record",
            entity_type=entity_type,
            entity_id=getattr(record, "id", None),
            errors=[str(exc)],
        ) from exc


def decode_record(
    model: type[RecordT],
    payload: bytes,
    *,
    key: str | None = None,
    entity_type: str | None = None,
    operation: str = "decode",
) -> RecordT:
    """
    Parse a stored payload into a record of the given model.

    Raises:
        RecordDecodeError: If the payload is not a valid encoding of the model
    """
    try:
        return model.model_validate_json(payload)
    except ValidationError as exc:
        raise RecordDecodeError(
            f"Stored value at '{key}' is not a valid {model.__name__} record",
            entity_type=entity_type,
            entity_id=key,
            operation=operation,
            errors=validation_messages(exc),
        ) from exc
    except ValueError as exc:
        raise RecordDecodeError(
            f"Stored value at '{key}' is not a valid {model.__name__} record",
            entity_type=entity_type,
            entity_id=key,
            operation=operation,
            errors=[str(exc)],
        ) from exc
