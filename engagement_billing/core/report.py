"""
Billing reports and aggregation.

Reports record the amount billed for a single engagement; summaries
aggregate a batch of reports for display.
"""

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_EVEN, ROUND_HALF_UP, localcontext
from typing import List
from uuid import UUID, uuid4

from .discounts import CENTS, money_context
from .engagement import Engagement


def format_currency(amount: Decimal) -> str:
    """Format an amount as US dollars, e.g. $9,596.00 or -$4.00."""
    amount = Decimal(amount)
    with localcontext(money_context(_integer_digits(amount))):
        rounded = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
        sign = "-" if rounded < 0 else ""
        return f"{sign}${abs(rounded):,.2f}"


def format_hours(hours: Decimal) -> str:
    """Format hours with grouping and at most three fraction digits."""
    hours = Decimal(hours)
    with localcontext(money_context(_integer_digits(hours))):
        rounded = hours.quantize(Decimal("0.001"), rounding=ROUND_HALF_EVEN)
    text = f"{rounded:,.3f}"
    return text.rstrip("0").rstrip(".")


def _integer_digits(value: Decimal) -> int:
    return max(value.adjusted() + 1, 1)


@dataclass(frozen=True)
class BillingReport:
    """Amount billed to a client for one engagement."""
    engagement: Engagement
    billed: Decimal
    report_id: UUID = field(default_factory=uuid4)

    @property
    def report_id_str(self) -> str:
        return str(self.report_id)

    @property
    def billed_as_currency(self) -> str:
        return format_currency(self.billed)


@dataclass(frozen=True)
class BillingSummary:
    """Totals across a batch of billing reports."""
    total: Decimal
    average: Decimal
    count: int


def summarize_reports(reports: List[BillingReport]) -> BillingSummary:
    """Sum and average the billed amounts of a batch of reports.

    Args:
        reports: Reports to aggregate

    Returns:
        BillingSummary with the average rounded half-up to 2 decimal places

    Raises:
        ValueError: If reports list is empty
    """
    if not reports:
        raise ValueError("Reports list cannot be empty")

    digits = max(_integer_digits(report.billed) for report in reports) + len(str(len(reports)))
    with localcontext(money_context(digits)):
        total = sum((report.billed for report in reports), Decimal("0.00"))
        average = (total / Decimal(len(reports))).quantize(CENTS, rounding=ROUND_HALF_UP)

    return BillingSummary(total=total, average=average, count=len(reports))
