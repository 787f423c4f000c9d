"""Money helpers: exact decimals rounded half up to two places"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")
HUNDRED = Decimal("100")


def to_money(value: Union[Decimal, int, str]) -> Decimal:
    """Round a value to two fractional digits, half up."""
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def line_total(unit_price: Decimal, quantity: int) -> Decimal:
    """Rounded total for one cart line"""
    return to_money(unit_price * quantity)


def percentage_of(amount: Decimal, percent: Decimal) -> Decimal:
    """`percent`% of `amount`, rounded"""
    return to_money(amount * percent / HUNDRED)
