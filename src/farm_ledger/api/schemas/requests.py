"""
Pydantic request schemas for API endpoints.

All incoming registration requests are validated against these schemas.
The ``id`` field is the bare identifier; the ledger adds the kind prefix.
"""

from pydantic import BaseModel, Field, model_validator


class RegisterRequest(BaseModel):
    """Common fields of every registration request."""

    id: str = Field(
        ...,
        description="Identifier without the kind prefix",
        examples=["1"],
    )

    model_config = {"extra": "forbid"}


class FarmerRegisterRequest(RegisterRequest):
    """Request to register a farmer."""

    name: str = Field(..., examples=["Alice"])
    email: str | None = Field(None, examples=["alice@example.com"])
    location: str | None = Field(None, examples=["Chiang Mai"])

    @model_validator(mode="after")
    def require_contact_field(self) -> "FarmerRegisterRequest":
        """Require an email or a location."""
        if self.email is None and self.location is None:
            raise ValueError("Farmer requires at least one of email or location")
        return self


class ConsumerRegisterRequest(RegisterRequest):
    """Request to register a consumer."""

    name: str
    location: str


class ProductRegisterRequest(RegisterRequest):
    """Request to register a product."""

    farmer_id: str = Field(..., description="Farmer reference, not validated")
    name: str = Field(..., examples=["Tomatoes"])
    price: str = Field(..., description="Decimal price as text", examples=["3.50"])


class TransactionRecordRequest(RegisterRequest):
    """Request to record a transaction."""

    farmer_id: str
    consumer_id: str
    amount: str = Field(..., description="Decimal amount as text", examples=["12.00"])
    timestamp: str = Field(..., examples=["2024-05-01T10:00:00Z"])
