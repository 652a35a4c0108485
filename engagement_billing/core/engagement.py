"""
Engagement model and time units.

An engagement is the billable span of time spent with a client.
"""

from dataclasses import dataclass
from decimal import Decimal

ONE_SECOND_MS = 1000
ONE_MINUTE_MS = ONE_SECOND_MS * 60
ONE_HOUR_MS = ONE_MINUTE_MS * 60


@dataclass(frozen=True)
class Engagement:
    """A billable engagement with a client.

    The length is not validated here; billing rejects negative
    engagements when they are quoted or processed.
    """
    length_ms: int

    @classmethod
    def from_minutes(cls, minutes: float) -> "Engagement":
        """Build an engagement from a minute count.

        Fractional minutes are truncated toward zero before conversion.
        """
        return cls(int(minutes) * ONE_MINUTE_MS)

    @property
    def whole_minutes(self) -> int:
        """Length of the engagement in minutes, truncated toward zero."""
        whole = abs(self.length_ms) // ONE_MINUTE_MS
        return whole if self.length_ms >= 0 else -whole

    @property
    def minutes(self) -> Decimal:
        """Length of the engagement in whole minutes.

        Partial minutes are not billed.
        """
        return Decimal(self.whole_minutes)

    @property
    def hours(self) -> Decimal:
        """Length of the engagement in (fractional) hours."""
        return Decimal(self.length_ms) / Decimal(ONE_HOUR_MS)

    def __str__(self) -> str:
        return f"ENGAGEMENT[lengthMs = {self.length_ms}]"
