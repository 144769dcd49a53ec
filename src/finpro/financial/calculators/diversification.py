"""
Diversification scoring of portfolio concentration risk.

A simple additive score from a base of 50:
- +20 when the portfolio spans at least 4 categories
- +30 when no category exceeds 40% of the total
- -30 when one category exceeds 70% of the total

clamped to [0, 100], then mapped to an advice tier and a display status.
The thresholds are fixed design constants, grouped in ScoringThresholds so
they can be substituted in tests.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from loguru import logger

from finpro.financial.calculators import tables
from finpro.financial.calculators.holdings import guarded_total
from finpro.financial.models import CategoryTotal

ADVICE_IDEAL = "ideal spread"
ADVICE_SLIGHT_SKEW = "mostly fine, slight skew"
ADVICE_CONCENTRATED = "concentration risk"
ADVICE_NO_DATA = "collecting data"


class HealthStatus(Enum):
    """Coarse status level used to colour the score."""

    GOOD = "good"
    CAUTION = "caution"
    ALERT = "alert"


@dataclass(frozen=True)
class ScoringThresholds:
    """Constants of the scoring rule."""

    base: int = tables.SCORE_BASE
    broad_category_count: int = tables.BROAD_CATEGORY_COUNT
    breadth_bonus: int = tables.BREADTH_BONUS
    balanced_max_weight: float = tables.BALANCED_MAX_WEIGHT
    balance_bonus: int = tables.BALANCE_BONUS
    concentrated_max_weight: float = tables.CONCENTRATED_MAX_WEIGHT
    concentration_penalty: int = tables.CONCENTRATION_PENALTY
    advice_ideal_above: int = tables.ADVICE_IDEAL_ABOVE
    advice_fine_above: int = tables.ADVICE_FINE_ABOVE
    status_good_above: int = tables.STATUS_GOOD_ABOVE
    status_caution_above: int = tables.STATUS_CAUTION_ABOVE


@dataclass(frozen=True)
class HealthScore:
    """Diversification score with its advice and status."""

    score: int
    advice: str
    status: HealthStatus
    category_count: int
    max_weight: float


class DiversificationScorer:
    """Score concentration risk from aggregated category totals."""

    def __init__(self, thresholds: ScoringThresholds | None = None):
        self.thresholds = thresholds or ScoringThresholds()

    def score(self, totals: Sequence[CategoryTotal], total_assets: int) -> HealthScore:
        th = self.thresholds
        n = len(totals) if total_assets != 0 else 0
        if n == 0:
            return HealthScore(0, ADVICE_NO_DATA, HealthStatus.ALERT, 0, 0.0)

        denominator = guarded_total(total_assets)
        max_weight = max(t.balance / denominator for t in totals)

        score = th.base
        if n >= th.broad_category_count:
            score += th.breadth_bonus
        if max_weight < th.balanced_max_weight:
            score += th.balance_bonus
        if max_weight > th.concentrated_max_weight:
            score -= th.concentration_penalty
        score = max(tables.SCORE_MIN, min(tables.SCORE_MAX, score))

        logger.debug(f"Diversification: n={n}, max_weight={max_weight:.3f}, score={score}")
        return HealthScore(
            score=score,
            advice=self.advice_for(score),
            status=self.status_for(score),
            category_count=n,
            max_weight=max_weight,
        )

    def advice_for(self, score: int) -> str:
        if score > self.thresholds.advice_ideal_above:
            return ADVICE_IDEAL
        if score > self.thresholds.advice_fine_above:
            return ADVICE_SLIGHT_SKEW
        return ADVICE_CONCENTRATED

    def status_for(self, score: int) -> HealthStatus:
        if score > self.thresholds.status_good_above:
            return HealthStatus.GOOD
        if score > self.thresholds.status_caution_above:
            return HealthStatus.CAUTION
        return HealthStatus.ALERT
