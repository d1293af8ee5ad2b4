"""API request/response schemas for payment initiation."""

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator


class PaymentInitiationRequest(BaseModel):
    """Checkout payload posted by the web client.

    Fields stay loosely typed; the orchestrator reports bad values as
    validation errors with a readable message.
    """

    amount: Any = None
    name: Any = None
    email: Any = None


class EsewaFormParams(BaseModel):
    """Form fields posted to the eSewa v2 form endpoint."""

    amount: str
    tax_amount: str
    total_amount: str
    product_service_charge: str = "0.00"
    product_delivery_charge: str = "0.00"
    transaction_uuid: str
    product_code: str
    signature: str
    success_url: str
    failure_url: str
    signed_field_names: str


class PaymentInitiationResponse(BaseModel):
    """Redirect target plus the signed form parameters."""

    payment_url: str = Field(serialization_alias="paymentUrl")
    params: EsewaFormParams


class ErrorResponse(BaseModel):
    error: str


ErrorKind = Literal["validation", "configuration", "unexpected"]


class InitiationError(BaseModel):
    kind: ErrorKind
    message: str


class InitiationResult(BaseModel):
    """Outcome of one initiation: exactly one of `response` or `error` is set."""

    response: PaymentInitiationResponse | None = None
    error: InitiationError | None = None

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "InitiationResult":
        if (self.response is None) == (self.error is None):
            raise ValueError("exactly one of response or error must be set")
        return self

    @classmethod
    def success(cls, response: PaymentInitiationResponse) -> "InitiationResult":
        return cls(response=response)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "InitiationResult":
        return cls(error=InitiationError(kind=kind, message=message))

    @property
    def ok(self) -> bool:
        return self.error is None
