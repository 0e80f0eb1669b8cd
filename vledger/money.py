"""
Money helpers.

Every amount in the ledger is a Decimal with four fractional
digits, matching the Numeric(19, 4) columns it is stored in.
Binary floats are refused outright: summing thousands of
entries must give exactly the same result every time, and
debits are compared to credits with ==, not a tolerance.
"""

from decimal import Decimal, InvalidOperation
from typing import Iterable

MONEY_PLACES = 4
MONEY_MAX_DIGITS = 19
QUANTUM = Decimal(1).scaleb(-MONEY_PLACES)
ZERO = Decimal("0").quantize(QUANTUM)
# Largest value a Numeric(19, 4) column holds
MAX_AMOUNT = Decimal(10) ** (MONEY_MAX_DIGITS - MONEY_PLACES) - QUANTUM


def to_money(value: Decimal | int | str) -> Decimal:
    """
    Convert a value to a ledger amount.

    Raises TypeError for floats (and bools), ValueError for
    values that are not finite or carry more precision than
    the ledger stores.
    """
    if isinstance(value, (float, bool)):
        raise TypeError(
            f"Monetary amounts must be Decimal, int or str, got {type(value).__name__}"
        )
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"Invalid monetary amount: {value!r}") from e

    if not value.is_finite():
        raise ValueError(f"Invalid monetary amount: {value}")

    quantized = value.quantize(QUANTUM)
    if quantized != value:
        raise ValueError(
            f"Monetary amount {value} has more than {MONEY_PLACES} decimal places"
        )
    return quantized


def money_sum(values: Iterable[Decimal]) -> Decimal:
    """Exact sum of amounts. An empty iterable sums to ZERO."""
    total = ZERO
    for value in values:
        total += to_money(value)
    return total
