"""
Pydantic schemas for API request/response validation.
"""

from farm_ledger.api.schemas.exceptions import (
    APIException,
    CorruptRecordError,
    InternalError,
    InvalidIdentifierAPIError,
    NotFoundError,
    ServiceUnavailableError,
    to_api_exception,
)
from farm_ledger.api.schemas.requests import (
    ConsumerRegisterRequest,
    FarmerRegisterRequest,
    ProductRegisterRequest,
    RegisterRequest,
    TransactionRecordRequest,
)
from farm_ledger.api.schemas.responses import (
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    RecordListResponse,
)

__all__ = [
    # Exceptions
    "APIException",
    "InvalidIdentifierAPIError",
    "NotFoundError",
    "CorruptRecordError",
    "InternalError",
    "ServiceUnavailableError",
    "to_api_exception",
    # Requests
    "RegisterRequest",
    "FarmerRegisterRequest",
    "ConsumerRegisterRequest",
    "ProductRegisterRequest",
    "TransactionRecordRequest",
    # Responses
    "RecordListResponse",
    "HealthResponse",
    "ErrorDetail",
    "ErrorResponse",
]
