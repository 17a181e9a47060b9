"""
Exception classes for API error handling.
"""

from farm_ledger.core.exceptions import (
    EntityNotFoundError,
    FarmLedgerError,
    InvalidIdentifierError,
    RecordDecodeError,
    RecordEncodeError,
    StoreError,
)


class APIException(Exception):
    """
    Base exception for API errors.

    All API exceptions should inherit from this class to ensure
    consistent error response formatting.
    """

    status_code: int = 500
    error_type: str = "api_error"
    message: str = "An error occurred"
    detail: str | None = None

    def __init__(
        self,
        message: str | None = None,
        detail: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.message = message or self.message
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidIdentifierAPIError(APIException):
    """Exception raised when a path or body identifier is rejected."""

    status_code = 400
    error_type = "invalid_identifier"
    message = "Invalid identifier"


class NotFoundError(APIException):
    """Exception raised when a requested record is not found."""

    status_code = 404
    error_type = "not_found"
    message = "Resource not found"


class CorruptRecordError(APIException):
    """Exception raised when a stored record cannot be decoded."""

    status_code = 500
    error_type = "corrupt_record"
    message = "Stored record could not be decoded"


class InternalError(APIException):
    """Exception raised for internal server errors."""

    status_code = 500
    error_type = "internal_error"
    message = "Internal server error"


class ServiceUnavailableError(APIException):
    """Exception raised when the ledger store is unavailable."""

    status_code = 503
    error_type = "service_unavailable"
    message = "Ledger store temporarily unavailable"


def to_api_exception(error: FarmLedgerError) -> APIException:
    """Translate a domain error into the API error carrying its status code."""
    detail = ", ".join(f"{k}={v}" for k, v in error.details.items()) or None
    if isinstance(error, InvalidIdentifierError):
        return InvalidIdentifierAPIError(message=error.message, detail=detail)
    if isinstance(error, EntityNotFoundError):
        return NotFoundError(message=error.message, detail=detail)
    if isinstance(error, RecordDecodeError):
        return CorruptRecordError(message=error.message, detail=detail)
    if isinstance(error, RecordEncodeError):
        return InternalError(message=error.message, detail=detail)
    if isinstance(error, StoreError):
        return ServiceUnavailableError(message=error.message, detail=detail)
    return InternalError(message=error.message, detail=detail)
