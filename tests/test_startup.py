"""Startup config logging must never print the gateway secret."""

from esewapay.common.startup import safe_config

from conftest import make_settings


def test_secret_is_redacted_and_unset_values_marked():
    config = make_settings(public_url="")
    summary = safe_config(config, ["esewa_secret_key", "public_url", "esewa_merchant_id"])
    assert summary == {
        "ESEWA_SECRET_KEY": "<redacted>",
        "PUBLIC_URL": "<unset>",
        "ESEWA_MERCHANT_ID": "EPAYTEST",
    }
