"""Core financial data models.

Holdings, goals, and the snapshot the analytics engine consumes. Any data
source (a spreadsheet endpoint, a CSV export, a YAML file) can produce
these models.

Money is an ``int`` in the base currency's smallest unit (e.g. yen).
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from functools import total_ordering

from loguru import logger

_YEAR_MONTH_RE = re.compile(r"^\s*(\d{4})\s*[/\-.]\s*(\d{1,2})\s*$")


def coerce_money(value) -> int:
    """Coerce a raw balance to Money.

    Anything that is not a finite number (None, "", "n/a", NaN, inf) becomes 0
    rather than propagating a fault. Fractions are floored.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        logger.debug(f"Non-numeric balance {value!r} coerced to 0")
        return 0
    if not amount.is_finite():
        logger.debug(f"Non-finite balance {value!r} coerced to 0")
        return 0
    return math.floor(amount)


@total_ordering
@dataclass(frozen=True)
class YearMonth:
    """A calendar month, e.g. ``YearMonth(2024, 2)`` for "2024/02"."""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be in 1..12, got {self.month}")

    @classmethod
    def parse(cls, text: str | YearMonth) -> YearMonth:
        """Parse "YYYY/MM" (also accepts "YYYY-MM")."""
        if isinstance(text, YearMonth):
            return text
        match = _YEAR_MONTH_RE.match(str(text))
        if not match:
            raise ValueError(f"Not a year-month: {text!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def from_date(cls, d: date) -> YearMonth:
        return cls(d.year, d.month)

    def shift(self, months: int) -> YearMonth:
        """Return the month ``months`` after (or before, if negative) this one."""
        index = self.year * 12 + (self.month - 1) + months
        return YearMonth(index // 12, index % 12 + 1)

    def __lt__(self, other: YearMonth) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return (self.year, self.month) < (other.year, other.month)

    def __str__(self) -> str:
        return f"{self.year:04d}/{self.month:02d}"


@dataclass(frozen=True)
class HoldingRecord:
    """Balance of one account at one point in time.

    Attributes:
        month: Month the balance was recorded for.
        category: Coarse asset class, e.g. "Cash", "Securities".
        label: Account name within the category.
        balance: Money; invalid or missing values are coerced to 0.
        memo: Free-form note (optional).
    """

    month: YearMonth
    category: str
    label: str
    balance: int = 0
    memo: str | None = None

    def __post_init__(self):
        if not isinstance(self.month, YearMonth):
            object.__setattr__(self, "month", YearMonth.parse(self.month))
        if not isinstance(self.balance, int) or isinstance(self.balance, bool):
            object.__setattr__(self, "balance", coerce_money(self.balance))


@dataclass(frozen=True)
class CategoryTotal:
    """Summed balance of one category."""

    category: str
    balance: int


@dataclass(frozen=True)
class Goal:
    """Savings goal, consumed read-only by the goal tracker."""

    name: str
    category: str
    target: int
    deadline: date

    def __post_init__(self):
        if not isinstance(self.target, int) or isinstance(self.target, bool):
            object.__setattr__(self, "target", coerce_money(self.target))
        if isinstance(self.deadline, str):
            object.__setattr__(self, "deadline", date.fromisoformat(self.deadline))


@dataclass(frozen=True)
class PortfolioSnapshot:
    """Everything the data-access layer hands to the engine in one go.

    Attributes:
        latest_holdings: Latest known balance per account (the "current snapshot").
        historical_holdings: Full history of recorded balances.
        goals: User goals.
        latest_month: Month of the most recent entry.
    """

    latest_holdings: tuple[HoldingRecord, ...]
    historical_holdings: tuple[HoldingRecord, ...]
    goals: tuple[Goal, ...]
    latest_month: YearMonth

    def __post_init__(self):
        for name in ("latest_holdings", "historical_holdings", "goals"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))
        if not isinstance(self.latest_month, YearMonth):
            object.__setattr__(self, "latest_month", YearMonth.parse(self.latest_month))


@dataclass(frozen=True)
class HoldingsSummary:
    """Result of aggregating holdings by category."""

    totals: tuple[CategoryTotal, ...] = field(default_factory=tuple)
    total_assets: int = 0
