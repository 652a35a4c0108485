"""
Billing service.

Quotes and processes engagements against the fixed rule table.
"""

import logging
from decimal import Decimal
from typing import Iterable, List

from .engagement import Engagement
from .report import BillingReport
from .rules import RULE_TABLE, RuleTable

logger = logging.getLogger(__name__)


class BillingService:
    """Performs billing operations against engagements.

    Single engagements raise on invalid input; batches log and skip
    the engagements that fail.
    """

    def __init__(self, rule_table: RuleTable = RULE_TABLE):
        """Initialize the service with a rule table.

        Args:
            rule_table: Rules used to price engagements
        """
        self.rule_table = rule_table

    def quote(self, engagement: Engagement) -> Decimal:
        """Quote the cost of an engagement.

        Args:
            engagement: Engagement to quote

        Returns:
            Cost rounded to 2 decimal places

        Raises:
            ValueError: If the engagement has a negative length
        """
        _validate(engagement)
        rule = self.rule_table.get_rule(engagement)
        return rule.calculate_cost(engagement)

    def process(self, engagement: Engagement) -> BillingReport:
        """Process an engagement for billing and produce a report.

        Raises:
            ValueError: If the engagement has a negative length
        """
        cost = self.quote(engagement)
        return BillingReport(engagement=engagement, billed=cost)

    def process_all(self, engagements: Iterable[Engagement]) -> List[BillingReport]:
        """Process a batch of engagements in order.

        Engagements that fail are logged and skipped.

        Args:
            engagements: Engagements to bill

        Returns:
            One report per successfully processed engagement
        """
        reports = []
        for engagement in engagements:
            try:
                reports.append(self.process(engagement))
            except Exception:
                logger.exception("Error processing engagement: %s", engagement)
        return reports


def _validate(engagement: Engagement) -> None:
    if engagement.length_ms < 0:
        raise ValueError(
            f"Cannot bill {engagement}: an engagement must have a non-negative length"
        )
