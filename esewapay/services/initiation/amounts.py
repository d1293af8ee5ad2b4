"""Tax-inclusive amount calculation.

Every step rounds to 2 places the way the gateway's web checkout does: the
binary float is rounded half-up on its exact decimal value, so 1.005 (stored
as 1.00499...) becomes 1.00. Tax is rounded before it is added to the base.
"""

import math
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

from esewapay.common.errors import ValidationError


TAX_RATE = 0.13
MIN_AMOUNT = 1
CENTS = Decimal("0.01")
# Enough digits for any finite float plus two places.
ROUNDING_PRECISION = 400

_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


@dataclass(frozen=True)
class ComputedAmounts:
    base_amount: Decimal
    tax_amount: Decimal
    total_amount: Decimal


def round2(value: float) -> Decimal:
    """Round a float to 2 decimal places, half-up on its exact value."""

    if not math.isfinite(value):
        raise ValidationError("Invalid amount")
    with localcontext() as ctx:
        ctx.prec = ROUNDING_PRECISION
        return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal) -> str:
    with localcontext() as ctx:
        ctx.prec = ROUNDING_PRECISION
        return f"{value:.2f}"


def parse_amount(value) -> float:
    """Convert a raw JSON amount into a finite float or raise `ValidationError`."""

    if isinstance(value, bool):
        raise ValidationError("Invalid amount")
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError as exc:
            raise ValidationError("Invalid amount") from exc
    elif isinstance(value, str) and _NUMBER_RE.match(value.strip()):
        number = float(value.strip())
    else:
        raise ValidationError("Invalid amount")
    if not math.isfinite(number):
        raise ValidationError("Invalid amount")
    return number


def compute_amounts(amount: float) -> ComputedAmounts:
    """Derive base, tax and total for an amount of at least `MIN_AMOUNT`."""

    if amount is None or isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise ValidationError("Invalid amount")
    if not math.isfinite(amount) or amount < MIN_AMOUNT:
        raise ValidationError("Invalid amount")

    base = round2(float(amount))
    tax = round2(float(base) * TAX_RATE)
    total = round2(float(base) + float(tax))
    return ComputedAmounts(base_amount=base, tax_amount=tax, total_amount=total)
