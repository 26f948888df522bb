"""Domain model for resolved timeframes."""

from dataclasses import dataclass
from datetime import datetime

from .ledger import DateRange


@dataclass(frozen=True)
class Timeframe:
    """Concrete window for a timeframe token.

    Attributes:
        token: Normalized token (7d, 30d, 90d or 1y).
        start: Inclusive start of the current period.
        end: Exclusive end of the current period ("now").
        comparison_start: Inclusive start of the preceding period.
        comparison_end: Exclusive end of the preceding period.
    """

    token: str
    start: datetime
    end: datetime
    comparison_start: datetime
    comparison_end: datetime

    @property
    def current(self) -> DateRange:
        return DateRange(self.start, self.end)

    @property
    def comparison(self) -> DateRange:
        return DateRange(self.comparison_start, self.comparison_end)


__all__ = ["Timeframe"]
