"""Error taxonomy for payment initiation.

Each error carries a `kind` tag. The orchestrator turns raised errors into
tagged results and the HTTP layer maps kinds to status codes.
"""


class PaymentError(Exception):
    """Base class for failures surfaced to API callers."""

    kind = "unexpected"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PaymentError):
    """Missing or malformed request fields. The caller can fix and resend."""

    kind = "validation"


class ConfigurationError(PaymentError):
    """Required process configuration is missing. Fatal for the request."""

    kind = "configuration"


class UnexpectedError(PaymentError):
    """Anything else that went wrong while building the gateway payload."""

    kind = "unexpected"
