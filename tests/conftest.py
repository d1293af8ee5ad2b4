"""Shared fixtures: explicit settings and deterministic transaction ids."""

import pytest

from esewapay.common.config import EsewaSettings
from esewapay.services.initiation.service import PaymentInitiationService


FIXED_UUID = "123e4567-e89b-42d3-a456-426614174000"


def make_settings(**overrides) -> EsewaSettings:
    values = {
        "public_url": "https://shop.example.com",
        "esewa_base_url": "https://rc-epay.esewa.com.np",
        "esewa_secret_key": "8gBm/:&EnhH.1/q",
        "esewa_merchant_id": "EPAYTEST",
    }
    values.update(overrides)
    return EsewaSettings(_env_file=None, **values)


@pytest.fixture
def config() -> EsewaSettings:
    return make_settings()


@pytest.fixture
def service(config) -> PaymentInitiationService:
    return PaymentInitiationService(config, transaction_id_factory=lambda: FIXED_UUID)
