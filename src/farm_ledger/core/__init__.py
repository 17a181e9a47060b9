"""
Farm Ledger Core Module.

Provides the key codec, entity record models and exception hierarchy.
"""

__all__ = [
    # Keys
    "SCAN_SENTINEL",
    "make_key",
    "scan_range",
    "validate_identifier",
    # Models
    "EntityKind",
    "EntitySchema",
    "ENTITY_SCHEMAS",
    "LedgerRecord",
    "Farmer",
    "Consumer",
    "Product",
    "Transaction",
    "encode_record",
    "decode_record",
    # Exceptions
    "FarmLedgerError",
    "RegistryError",
    "InvalidIdentifierError",
    "EntityNotFoundError",
    "RecordDecodeError",
    "RecordEncodeError",
    "StoreError",
    "ConfigurationError",
]

from farm_ledger.core.exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    FarmLedgerError,
    InvalidIdentifierError,
    RecordDecodeError,
    RecordEncodeError,
    RegistryError,
    StoreError,
)
from farm_ledger.core.keys import SCAN_SENTINEL, make_key, scan_range, validate_identifier
from farm_ledger.core.models import (
    ENTITY_SCHEMAS,
    Consumer,
    EntityKind,
    EntitySchema,
    Farmer,
    LedgerRecord,
    Product,
    Transaction,
    decode_record,
    encode_record,
)
