"""
Discount calculators.

Each calculator derives a subtractable amount from an engagement's length.
"""

from decimal import Context, Decimal, ROUND_HALF_UP, getcontext
from enum import Enum
from typing import List

from .engagement import Engagement

CENTS = Decimal("0.01")
PRECISION_MARGIN = 12


def money_context(digits: int) -> Context:
    """Decimal context wide enough for amounts of `digits` integer digits, to the cent."""
    context = getcontext().copy()
    context.prec = max(context.prec, digits + PRECISION_MARGIN)
    return context


def get_digits(minutes: float) -> List[int]:
    """Decimal digits of the truncated value, least significant first.

    Values below one yield no digits.
    """
    digits = []
    value = int(minutes)
    while value > 0:
        digits.append(value % 10)
        value //= 10
    return digits


def digit_additive_discount(engagement: Engagement) -> Decimal:
    """Discount equal to the sum of the digits of the whole minutes.

    400 minutes -> 4 + 0 + 0 -> 4.00
    """
    discount = Decimal(sum(get_digits(engagement.whole_minutes)))
    return discount.quantize(CENTS, rounding=ROUND_HALF_UP)


def square_root_discount(engagement: Engagement) -> Decimal:
    """Discount equal to the square root of the engagement's hours."""
    hours = engagement.hours
    if hours <= 0:
        return Decimal("0").quantize(CENTS)
    return hours.sqrt().quantize(CENTS, rounding=ROUND_HALF_UP)


class DiscountCalculator(Enum):
    """Available discount calculators."""
    DIGIT_ADDITIVE = "digit_additive"
    SQUARE_ROOT = "square_root"

    def calculate(self, engagement: Engagement) -> Decimal:
        """Calculate the discount for an engagement, rounded to cents."""
        return _CALCULATORS[self](engagement)


_CALCULATORS = {
    DiscountCalculator.DIGIT_ADDITIVE: digit_additive_discount,
    DiscountCalculator.SQUARE_ROOT: square_root_discount,
}
