"""Rebalance analysis: current allocation vs target allocation.

For every category held:
- current weight = balance / total (guarded denominator)
- diff in percentage points = (current - target) * 100
- diff amount = target * total - balance (positive: add, negative: trim)

A category within the tolerance band (strictly under 3 points) is "Perfect".
The headline figure is the sum of shortfalls only: the amount to invest to
bring every underweight category up to target, ignoring surpluses.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

from loguru import logger

from finpro.financial.calculators import tables
from finpro.financial.calculators.holdings import guarded_total
from finpro.financial.models import CategoryTotal


class RebalanceStatus(Enum):
    PERFECT = "Perfect"
    OVER = "Over"
    UNDER = "Under"


@dataclass(frozen=True)
class RebalanceEntry:
    """Deviation of one category from its target weight."""

    category: str
    current_weight: float
    target_weight: float
    diff_percent_points: float
    diff_amount: int
    status: RebalanceStatus


@dataclass(frozen=True)
class RebalancePlan:
    """Per-category deviations plus the total amount needed to reach target."""

    entries: tuple[RebalanceEntry, ...] = field(default_factory=tuple)
    total_rebalance_amount: int = 0

    def by_status(self, status: RebalanceStatus) -> list[RebalanceEntry]:
        return [e for e in self.entries if e.status == status]


class RebalanceAnalyzer:
    """Compare category weights to a fixed allocation target table."""

    def __init__(
        self,
        targets: Mapping[str, float] | None = None,
        tolerance_points: float = tables.REBALANCE_TOLERANCE_POINTS,
    ):
        self.targets = targets if targets is not None else tables.DEFAULT_ALLOCATION_TARGETS
        self.tolerance_points = tolerance_points

    def classify(self, diff_percent_points: float) -> RebalanceStatus:
        if abs(diff_percent_points) < self.tolerance_points:
            return RebalanceStatus.PERFECT
        if diff_percent_points > 0:
            return RebalanceStatus.OVER
        return RebalanceStatus.UNDER

    def analyze(self, totals: Sequence[CategoryTotal], total_assets: int) -> RebalancePlan:
        denominator = guarded_total(total_assets)
        entries = []
        for t in totals:
            current_weight = t.balance / denominator
            target_weight = self.targets.get(t.category, 0.0)
            # An exact 3.0-point deviation must land on the band edge, not at 2.9999...
            diff_points = round((current_weight - target_weight) * 100, 9)
            diff_amount = round(target_weight * total_assets - t.balance)
            entries.append(
                RebalanceEntry(
                    category=t.category,
                    current_weight=current_weight,
                    target_weight=target_weight,
                    diff_percent_points=diff_points,
                    diff_amount=diff_amount,
                    status=self.classify(diff_points),
                )
            )

        shortfall = sum(max(0, e.diff_amount) for e in entries)
        logger.debug(f"Rebalance: {len(entries)} categories, {shortfall:,} needed to reach target")
        return RebalancePlan(entries=tuple(entries), total_rebalance_amount=shortfall)
