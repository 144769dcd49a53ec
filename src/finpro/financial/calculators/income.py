"""Passive income estimate from per-category yield assumptions."""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from finpro.financial.calculators import tables
from finpro.financial.models import CategoryTotal


@dataclass(frozen=True)
class IncomeEstimate:
    """Projected income, floored to the smallest currency unit."""

    annual_income: int
    monthly_income: int
    daily_income: int


class YieldEstimator:
    """Estimate annual/monthly/daily income from category totals.

    Categories missing from the yield table yield 0. Only the final figures
    are floored; the annual sum is kept at full precision until then.
    """

    def __init__(self, yields: Mapping[str, float] | None = None):
        self.yields = yields if yields is not None else tables.DEFAULT_YIELD_ASSUMPTIONS

    def estimate(self, totals: Sequence[CategoryTotal]) -> IncomeEstimate:
        annual = sum(t.balance * self.yields.get(t.category, 0.0) for t in totals)
        return IncomeEstimate(
            annual_income=math.floor(annual),
            monthly_income=math.floor(annual / 12),
            daily_income=math.floor(annual / 365),
        )
