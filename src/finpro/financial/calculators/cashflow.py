"""Short cash-flow window: actual vs projected months.

The window is the current month plus the next few months (3 by default).
Each month's amount is the sum of every recorded balance dated that month.
Months up to and including the current one are "actual", later months are
"projected".

The current month is always reported: when nothing has been entered for it
yet, the latest known total stands in. Any other month that sums to zero is
dropped.
"""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from finpro.financial.calculators import tables
from finpro.financial.models import HoldingRecord, YearMonth, coerce_money


class FlowType(Enum):
    ACTUAL = "actual"
    PROJECTED = "projected"


@dataclass(frozen=True)
class CashFlowPoint:
    month: YearMonth
    amount: int
    type: FlowType


class CashFlowForecaster:
    """Split a short window of dated records into actual and projected months."""

    def __init__(self, lookahead_months: int = tables.FORECAST_LOOKAHEAD_MONTHS):
        self.lookahead_months = lookahead_months

    def window(self, current_month: YearMonth) -> list[YearMonth]:
        return [current_month.shift(i) for i in range(self.lookahead_months + 1)]

    def forecast(
        self,
        history: Iterable[HoldingRecord],
        current_month: YearMonth,
        total_assets: int,
    ) -> list[CashFlowPoint]:
        """
        Args:
            history: Full historical record sequence, not just the latest snapshot.
            current_month: The calendar month treated as "now".
            total_assets: Latest known total, used when the current month has no entries.
        """
        months = self.window(current_month)
        wanted = set(months)
        sums: dict[YearMonth, int] = defaultdict(int)
        seen: set[YearMonth] = set()
        for record in history:
            if record.month in wanted:
                sums[record.month] += coerce_money(record.balance)
                seen.add(record.month)

        points = []
        for month in months:
            if month == current_month:
                amount = sums[month] if month in seen else total_assets
            else:
                amount = sums[month]
                if amount == 0:
                    continue
            flow_type = FlowType.ACTUAL if month <= current_month else FlowType.PROJECTED
            points.append(CashFlowPoint(month=month, amount=amount, type=flow_type))
        return points
