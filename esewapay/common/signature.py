"""eSewa request signing.

The gateway verifies each form post by recomputing a Base64 HMAC-SHA256 over
`total_amount=...,transaction_uuid=...,product_code=...` with the merchant
secret. Field order and the `signed_field_names` value must match exactly.
"""

import base64
import hashlib
import hmac

from esewapay.common.config import EsewaSettings
from esewapay.common.errors import ConfigurationError


SIGNED_FIELDS = ("total_amount", "transaction_uuid", "product_code")
SIGNED_FIELD_NAMES = ",".join(SIGNED_FIELDS)


def build_signing_message(total_amount: str, transaction_uuid: str, product_code: str) -> str:
    """Join the signed fields as `key=value` pairs in gateway order."""

    values = {
        "total_amount": total_amount,
        "transaction_uuid": transaction_uuid,
        "product_code": product_code,
    }
    return ",".join(f"{name}={values[name]}" for name in SIGNED_FIELDS)


def generate_signature(message: str, secret_key: str) -> str:
    """Return the Base64-encoded HMAC-SHA256 of `message` keyed by `secret_key`."""

    digest = hmac.new(
        secret_key.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("utf-8")


class EsewaSigner:
    """Signs canonical messages with the secret from injected settings."""

    def __init__(self, config: EsewaSettings) -> None:
        self.config = config

    def sign(self, message: str) -> str:
        # Read at call time so a missing secret fails the request, not the import.
        secret = self.config.esewa_secret_key
        if secret is None or not secret.get_secret_value():
            raise ConfigurationError("Missing ESEWA_SECRET_KEY in environment variables.")
        return generate_signature(message, secret.get_secret_value())
