"""Send one payment initiation request and print the gateway payload.

Handy for checking a deployment's eSewa configuration end to end.
"""

import argparse
import json

import httpx


def initiate(base_url: str, amount: str, name: str, email: str) -> httpx.Response:
    """POST one checkout payload to the initiation endpoint."""

    with httpx.Client(timeout=10.0) as client:
        return client.post(
            f"{base_url}/api/payment/initiate",
            json={"amount": amount, "name": name, "email": email},
        )


def main() -> None:
    """Parse CLI args, send the request and pretty-print the response."""

    parser = argparse.ArgumentParser(description="Initiate one eSewa payment.")
    parser.add_argument("--base-url", default="http://localhost:8000")
    parser.add_argument("--amount", required=True)
    parser.add_argument("--name", default="Test Customer")
    parser.add_argument("--email", default="customer@example.com")
    args = parser.parse_args()

    resp = initiate(args.base_url, args.amount, args.name, args.email)
    print(f"status={resp.status_code}")
    print(json.dumps(resp.json(), indent=2))


if __name__ == "__main__":
    main()
