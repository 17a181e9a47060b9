"""
Key codec - namespaced storage keys and prefix scan ranges.

A key is always ``<prefix><identifier>``. A prefix scan covers the
half-open range ``[prefix, prefix + "~")``, so identifiers must only use
characters that sort before the sentinel.
"""

from farm_ledger.core.exceptions import InvalidIdentifierError

SCAN_SENTINEL = "~"

FARMER_PREFIX = "farmer-"
CONSUMER_PREFIX = "consumer-"
PRODUCT_PREFIX = "product-"
TRANSACTION_PREFIX = "transaction-"


def make_key(prefix: str, identifier: str) -> str:
    """Return the storage key for an identifier under a prefix."""
    return prefix + identifier


def scan_range(prefix: str) -> tuple[str, str]:
    """Return the half-open ``(lo, hi)`` range holding every key under prefix."""
    return prefix, prefix + SCAN_SENTINEL


def validate_identifier(identifier: str, *, entity_type: str | None = None) -> None:
    """
    Reject identifiers that would break the prefix scan invariant.

    Args:
        identifier: Caller-supplied identifier (without prefix)
        entity_type: Entity kind, for error details

    Raises:
        InvalidIdentifierError: If the identifier is empty, not a string, or
            contains a character at or after the scan sentinel
    """
    if not isinstance(identifier, str):
        raise InvalidIdentifierError(
            "Identifier must be a string",
            entity_type=entity_type,
            reason=f"got {type(identifier).__name__}",
        )
    if not identifier:
        raise InvalidIdentifierError(
            "Identifier must not be empty",
            entity_type=entity_type,
            reason="empty",
        )
    # Non-ASCII code points encode to UTF-8 lead bytes above "~" as well.
    for position, char in enumerate(identifier):
        if char >= SCAN_SENTINEL:
            raise InvalidIdentifierError(
                f"Identifier contains reserved character {char!r}",
                entity_type=entity_type,
                entity_id=identifier,
                reason=f"character at position {position} sorts at or after {SCAN_SENTINEL!r}",
            )
