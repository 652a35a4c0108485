"""
Billing rules and rule selection.

Handles cost computations for short, medium and long engagements.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from enum import Enum
from typing import Optional

from .discounts import CENTS, DiscountCalculator, money_context
from .engagement import Engagement

logger = logging.getLogger(__name__)


class RuleKind(Enum):
    """Engagement length tiers."""
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


@dataclass(frozen=True)
class BillingRule:
    """Rate, time adjustment and optional discount for one tier.

    A rate or time adjustment factor of 1.0 leaves the value unadjusted.
    """
    kind: RuleKind
    rate: Decimal = Decimal("1.0")
    time_adjustment_factor: Decimal = Decimal("1.0")
    discount: Optional[DiscountCalculator] = None

    def calculate_cost(self, engagement: Engagement) -> Decimal:
        """Calculate the cost of an engagement under this rule.

        Args:
            engagement: Engagement to bill

        Returns:
            minutes * time adjustment factor * rate, less the discount when
            one is configured, rounded half-up to 2 decimal places
        """
        with localcontext(money_context(len(str(abs(engagement.length_ms))))):
            adjusted = engagement.minutes * self.time_adjustment_factor
            cost = (adjusted * self.rate).quantize(CENTS, rounding=ROUND_HALF_UP)

            if self.discount is not None:
                discounted = cost - self.discount.calculate(engagement)
                return discounted.quantize(CENTS, rounding=ROUND_HALF_UP)
            return cost


@dataclass(frozen=True)
class RuleTable:
    """Fixed rule table keyed by engagement length in minutes."""
    short_threshold: Decimal
    medium_threshold: Decimal
    short: BillingRule
    medium: BillingRule
    long: BillingRule

    def get_rule(self, engagement: Engagement) -> BillingRule:
        """Get the billing rule for an engagement.

        Engagements under the short threshold are short, those under the
        medium threshold are medium, everything else is long.
        """
        minutes = engagement.minutes
        if minutes < self.short_threshold:
            rule = self.short
        elif minutes < self.medium_threshold:
            rule = self.medium
        else:
            rule = self.long

        logger.debug("Selected %s rule for %s", rule.kind.value, engagement)
        return rule


# Fixed rule table - three tiers, no dynamic configuration
RULE_TABLE = RuleTable(
    short_threshold=Decimal("1000"),
    medium_threshold=Decimal("100000"),
    short=BillingRule(
        kind=RuleKind.SHORT,
        rate=Decimal("2.0"),
        time_adjustment_factor=Decimal("12.0"),
        discount=DiscountCalculator.DIGIT_ADDITIVE
    ),
    medium=BillingRule(
        kind=RuleKind.MEDIUM,
        rate=Decimal("3.4"),
        time_adjustment_factor=Decimal("6.0"),
        discount=DiscountCalculator.SQUARE_ROOT
    ),
    long=BillingRule(
        kind=RuleKind.LONG,
        rate=Decimal("0.6")
    )
)
