"""Payment initiation orchestration.

Validates the checkout payload, derives tax-inclusive amounts, mints a
transaction id, signs the canonical message and assembles the eSewa form
payload. Failures come back as tagged results instead of exceptions.
"""

from typing import Callable
from uuid import uuid4

from esewapay.common.config import EsewaSettings
from esewapay.common.errors import PaymentError, UnexpectedError, ValidationError
from esewapay.common.logging import logger, transaction_uuid_ctx
from esewapay.common.signature import SIGNED_FIELD_NAMES, EsewaSigner, build_signing_message
from esewapay.services.initiation.amounts import compute_amounts, format_amount, parse_amount
from esewapay.services.initiation.schemas import (
    EsewaFormParams,
    InitiationResult,
    PaymentInitiationRequest,
    PaymentInitiationResponse,
)


ESEWA_FORM_PATH = "/api/epay/main/v2/form"
DEFAULT_FAILURE_MESSAGE = "Payment failed"


def new_transaction_uuid() -> str:
    return str(uuid4())


class PaymentInitiationService:
    """Builds signed eSewa redirect payloads from checkout requests."""

    def __init__(
        self,
        config: EsewaSettings,
        transaction_id_factory: Callable[[], str] = new_transaction_uuid,
    ) -> None:
        self.config = config
        self.signer = EsewaSigner(config)
        self.transaction_id_factory = transaction_id_factory

    def _validate(self, req: PaymentInitiationRequest) -> float:
        # Falsy values (None, "", 0) count as missing, same as the web client.
        if not req.amount or not req.name or not req.email:
            raise ValidationError("Missing required fields")
        return parse_amount(req.amount)

    def build_response(self, req: PaymentInitiationRequest) -> PaymentInitiationResponse:
        """Run the full initiation flow; raises on any failure."""

        amount = self._validate(req)
        amounts = compute_amounts(amount)
        transaction_uuid = self.transaction_id_factory()
        transaction_uuid_ctx.set(transaction_uuid)

        total_amount = format_amount(amounts.total_amount)
        product_code = self.config.esewa_merchant_id
        message = build_signing_message(total_amount, transaction_uuid, product_code)
        signature = self.signer.sign(message)

        public_url = self.config.public_url
        return PaymentInitiationResponse(
            payment_url=f"{self.config.esewa_base_url}{ESEWA_FORM_PATH}",
            params=EsewaFormParams(
                amount=format_amount(amounts.base_amount),
                tax_amount=format_amount(amounts.tax_amount),
                total_amount=total_amount,
                transaction_uuid=transaction_uuid,
                product_code=product_code,
                signature=signature,
                success_url=f"{public_url}/success",
                failure_url=f"{public_url}/failure",
                signed_field_names=SIGNED_FIELD_NAMES,
            ),
        )

    def initiate(self, req: PaymentInitiationRequest) -> InitiationResult:
        """Return a success payload or a tagged error for one checkout request."""

        try:
            response = self.build_response(req)
        except PaymentError as exc:
            if exc.kind == "validation":
                logger.info("payment initiation rejected: %s", exc.message)
            else:
                logger.error("payment initiation failed kind=%s: %s", exc.kind, exc.message)
            return InitiationResult.failure(exc.kind, exc.message or DEFAULT_FAILURE_MESSAGE)
        except Exception as exc:
            logger.exception("unexpected payment initiation error: %s", type(exc).__name__)
            error = UnexpectedError(str(exc) or DEFAULT_FAILURE_MESSAGE)
            return InitiationResult.failure(error.kind, error.message)

        logger.info(
            "payment initiated total_amount=%s transaction_uuid=%s",
            response.params.total_amount,
            response.params.transaction_uuid,
        )
        return InitiationResult.success(response)
