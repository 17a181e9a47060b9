"""
Entity Registry - register, get and list records of one entity kind.

One generic registry serves every kind; an EntitySchema fixes the key
prefix and the record model.
"""

from typing import Generic

from pydantic import ValidationError

from farm_ledger.core.exceptions import EntityNotFoundError, RecordEncodeError
from farm_ledger.core.keys import make_key, scan_range, validate_identifier
from farm_ledger.core.models import (
    EntitySchema,
    RecordT,
    decode_record,
    encode_record,
    validation_messages,
)
from farm_ledger.store.base import LedgerStore


class EntityRegistry(Generic[RecordT]):
    """
    Registry for a single entity kind.

    Holds no state of its own; every record lives in the store passed at
    construction. Errors propagate to the caller unchanged:

    - InvalidIdentifierError: identifier empty or outside the scan alphabet
    - EntityNotFoundError: no value at the key
    - RecordDecodeError: value present but not a valid record
    - RecordEncodeError: record could not be built or serialized
    - StoreError: the store failed
    """

    def __init__(self, store: LedgerStore, schema: EntitySchema[RecordT]):
        """
        Initialize the registry.

        Args:
            store: Ordered key-value store holding the records
            schema: Kind, prefix and record model served by this registry
        """
        self._store = store
        self._schema = schema

    @property
    def schema(self) -> EntitySchema[RecordT]:
        return self._schema

    @property
    def kind(self) -> str:
        return self._schema.kind.value

    @property
    def prefix(self) -> str:
        return self._schema.prefix

    def key_for(self, entity_id: str) -> str:
        """Validate an identifier and return its storage key."""
        validate_identifier(entity_id, entity_type=self.kind)
        return make_key(self.prefix, entity_id)

    def register(self, entity_id: str, **attributes: str) -> RecordT:
        """
        Store a record under the prefixed key, replacing any prior value.

        The stored record's id is the full key, not the bare identifier.

        Args:
            entity_id: Caller-supplied identifier (without prefix)
            **attributes: Record attributes, all text

        Returns:
            The record as written
        """
        key = self.key_for(entity_id)
        if "id" in attributes:
            raise RecordEncodeError(
                "The id attribute is derived from the key and cannot be supplied",
                entity_type=self.kind,
                entity_id=key,
            )

        try:
            record = self._schema.model(id=key, **attributes)
        except ValidationError as exc:
            raise RecordEncodeError(
                f"Invalid attributes for {self.kind} record",
                entity_type=self.kind,
                entity_id=key,
                errors=validation_messages(exc),
            ) from exc

        payload = encode_record(record, entity_type=self.kind)
        self._store.put(key, payload)
        return record

    def get(self, entity_id: str) -> RecordT:
        """
        Load and decode the record stored for an identifier.

        Raises:
            EntityNotFoundError: If nothing is stored at the key
            RecordDecodeError: If the stored value does not decode
        """
        key = self.key_for(entity_id)
        payload = self._store.get(key)
        if payload is None:
            raise EntityNotFoundError(
                f"{self.kind} {key} does not exist",
                entity_type=self.kind,
                entity_id=key,
            )
        return decode_record(
            self._schema.model, payload, key=key, entity_type=self.kind, operation="get"
        )

    def list_all(self) -> list[RecordT]:
        """
        Decode every record of this kind in ascending key order.

        The first undecodable value aborts the whole listing; no partial
        result is returned.

        Raises:
            RecordDecodeError: If any stored value under the prefix does not decode
        """
        lo, hi = scan_range(self.prefix)
        records: list[RecordT] = []
        with self._store.scan(lo, hi) as entries:
            for key, payload in entries:
                records.append(
                    decode_record(
                        self._schema.model,
                        payload,
                        key=key,
                        entity_type=self.kind,
                        operation="list",
                    )
                )
        return records
