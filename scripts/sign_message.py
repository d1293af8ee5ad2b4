"""Print the eSewa signature for one set of signed fields.

Uses ESEWA_SECRET_KEY from the environment (or `.env`), useful when the
gateway reports a signature mismatch.
"""

import argparse

from esewapay.common.config import EsewaSettings
from esewapay.common.errors import ConfigurationError
from esewapay.common.signature import EsewaSigner, build_signing_message


def main() -> None:
    """Parse CLI args and print the canonical message plus its signature."""

    parser = argparse.ArgumentParser(description="Sign eSewa total/uuid/product code.")
    parser.add_argument("--total-amount", required=True, help='Formatted total, e.g. "113.00"')
    parser.add_argument("--transaction-uuid", required=True)
    parser.add_argument("--product-code", default=None, help="Defaults to ESEWA_MERCHANT_ID")
    args = parser.parse_args()

    config = EsewaSettings()
    product_code = args.product_code or config.esewa_merchant_id
    message = build_signing_message(args.total_amount, args.transaction_uuid, product_code)
    try:
        signature = EsewaSigner(config).sign(message)
    except ConfigurationError as exc:
        raise SystemExit(str(exc)) from exc
    print(f"message={message}")
    print(f"signature={signature}")


if __name__ == "__main__":
    main()
