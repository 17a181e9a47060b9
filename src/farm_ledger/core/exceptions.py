"""
Farm Ledger Exception Hierarchy.

Defines all custom exceptions raised by the key codec, the stores and the
entity registries. Every error carries structured details for debugging.
"""

from typing import Any


class FarmLedgerError(Exception):
    """
    Base exception for all Farm Ledger errors.

    All custom exceptions inherit from this class, allowing
    generic catch blocks and consistent error handling.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        """
        Initialize a FarmLedgerError.

        Args:
            message: Human-readable error message
            details: Optional structured data for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation with details."""
        base = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class RegistryError(FarmLedgerError):
    """
    Errors in entity registry operations.

    Raised when a register, get or list operation cannot complete:
    - Identifier rejected
    - Entity not found
    - Record cannot be encoded or decoded
    """

    def __init__(
        self,
        message: str,
        *,
        entity_type: str | None = None,
        entity_id: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize a RegistryError.

        Args:
            message: Human-readable error message
            entity_type: Kind of entity involved
            entity_id: Identifier or storage key involved
            operation: Operation being performed
            details: Optional structured data for debugging
        """
        details = details or {}
        if entity_type:
            details["entity_type"] = entity_type
        if entity_id:
            details["entity_id"] = entity_id
        if operation:
            details["operation"] = operation

        super().__init__(message, details=details)
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.operation = operation


class InvalidIdentifierError(RegistryError):
    """
    Raised when a caller-supplied identifier cannot be used as a key suffix.

    Identifiers must be non-empty and must not contain characters that sort
    at or after the scan sentinel, otherwise prefix scans would miss them.
    """

    def __init__(
        self,
        message: str = "Invalid identifier",
        *,
        entity_type: str | None = None,
        entity_id: str | None = None,
        reason: str | None = None,
    ):
        details = {"reason": reason} if reason else None
        super().__init__(
            message,
            entity_type=entity_type,
            entity_id=entity_id,
            operation="validate",
            details=details,
        )
        self.reason = reason


class EntityNotFoundError(RegistryError):
    """Raised when no value is stored under the requested key."""

    def __init__(
        self,
        message: str = "Entity not found",
        *,
        entity_type: str | None = None,
        entity_id: str | None = None,
    ):
        super().__init__(
            message,
            entity_type=entity_type,
            entity_id=entity_id,
            operation="get",
        )


class RecordDecodeError(RegistryError):
    """
    Raised when a stored payload is not a valid record of the expected kind.

    Distinct from EntityNotFoundError: the key exists but its value is
    corrupt or belongs to a different schema.
    """

    def __init__(
        self,
        message: str = "Stored record could not be decoded",
        *,
        entity_type: str | None = None,
        entity_id: str | None = None,
        operation: str = "decode",
        errors: list[str] | None = None,
    ):
        details = {"errors": errors} if errors else None
        super().__init__(
            message,
            entity_type=entity_type,
            entity_id=entity_id,
            operation=operation,
            details=details,
        )
        self.errors = errors or []


class RecordEncodeError(RegistryError):
    """Raised when a record cannot be built or serialized before a write."""

    def __init__(
        self,
        message: str = "Record could not be encoded",
        *,
        entity_type: str | None = None,
        entity_id: str | None = None,
        errors: list[str] | None = None,
    ):
        details = {"errors": errors} if errors else None
        super().__init__(
            message,
            entity_type=entity_type,
            entity_id=entity_id,
            operation="encode",
            details=details,
        )
        self.errors = errors or []


class StoreError(FarmLedgerError):
    """
    Errors reported by the underlying key-value store.

    Raised for I/O, connectivity or cursor faults. Never retried inside
    the registry; the original backend exception is chained as __cause__.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        key: str | None = None,
        backend: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """
        Initialize a StoreError.

        Args:
            message: Human-readable error message
            operation: Store operation that failed (get, put, scan)
            key: Key or range bound involved
            backend: Name of the store implementation
            details: Optional structured data for debugging
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        if key is not None:
            details["key"] = key
        if backend:
            details["backend"] = backend

        super().__init__(message, details=details)
        self.operation = operation
        self.key = key
        self.backend = backend


class ConfigurationError(FarmLedgerError):
    """
    Errors in configuration loading or validation.

    Raised when:
    - An environment variable holds an unsupported value
    - The configured store cannot be created
    """

    def __init__(
        self,
        message: str,
        *,
        env_var: str | None = None,
        value: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if env_var:
            details["env_var"] = env_var
        if value is not None:
            details["value"] = value

        super().__init__(message, details=details)
        self.env_var = env_var
        self.value = value


def format_exception(error: Exception) -> str:
    """
    Format an exception for user-friendly display.

    Args:
        error: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(error, FarmLedgerError):
        return str(error)
    return f"{error.__class__.__name__}: {error}"
