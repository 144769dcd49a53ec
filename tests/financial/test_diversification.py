"""Tests for finpro.financial.calculators.diversification."""

import random

import pytest

from finpro.financial.calculators.diversification import (
    ADVICE_CONCENTRATED,
    ADVICE_IDEAL,
    ADVICE_NO_DATA,
    ADVICE_SLIGHT_SKEW,
    DiversificationScorer,
    HealthStatus,
    ScoringThresholds,
)
from finpro.financial.models import CategoryTotal


def _totals(**balances):
    totals = [CategoryTotal(name, amount) for name, amount in balances.items()]
    return totals, sum(balances.values())


@pytest.fixture
def scorer():
    return DiversificationScorer()


class TestScore:
    def test_two_categories_concentrated(self, scorer):
        totals, total = _totals(Cash=1000, Stocks=4000)
        result = scorer.score(totals, total)
        assert result.score == 20  # 50 - 30, max weight 0.8
        assert result.advice == ADVICE_CONCENTRATED
        assert result.status == HealthStatus.ALERT
        assert result.max_weight == pytest.approx(0.8)

    def test_four_even_categories_is_ideal(self, scorer):
        totals, total = _totals(A=250, B=250, C=250, D=250)
        result = scorer.score(totals, total)
        assert result.score == 100
        assert result.advice == ADVICE_IDEAL
        assert result.status == HealthStatus.GOOD

    def test_four_categories_slight_skew(self, scorer):
        totals, total = _totals(Cash=1_850_000, Securities=4_650_000, Crypto=920_000, Insurance=2_110_000)
        result = scorer.score(totals, total)
        assert result.score == 70
        assert result.advice == ADVICE_SLIGHT_SKEW
        assert result.status == HealthStatus.CAUTION

    def test_middle_band_has_no_adjustment(self, scorer):
        totals, total = _totals(A=500, B=300, C=200)
        result = scorer.score(totals, total)
        assert result.score == 50
        assert result.advice == ADVICE_CONCENTRATED
        assert result.status == HealthStatus.ALERT

    def test_empty(self, scorer):
        result = scorer.score([], 0)
        assert result.score == 0
        assert result.category_count == 0
        assert result.advice == ADVICE_NO_DATA

    def test_zero_total_counts_no_categories(self, scorer):
        result = scorer.score([CategoryTotal("Cash", 0), CategoryTotal("Stocks", 0)], 0)
        assert result.score == 0

    def test_custom_thresholds(self):
        scorer = DiversificationScorer(ScoringThresholds(base=90, concentration_penalty=0))
        totals, total = _totals(Cash=1000, Stocks=4000)
        assert scorer.score(totals, total).score == 90


class TestProperties:
    def test_score_bounds(self, scorer):
        rng = random.Random(11)
        for _ in range(500):
            n = rng.randint(0, 8)
            totals = [CategoryTotal(f"c{i}", rng.randint(0, 10**9)) for i in range(n)]
            total = sum(t.balance for t in totals)
            result = scorer.score(totals, total)
            assert isinstance(result.score, int)
            assert 0 <= result.score <= 100

    @pytest.mark.parametrize(
        "three,five",
        [
            ([500, 300, 200], [500, 200, 100, 100, 100]),
            ([800, 100, 100], [800, 50, 50, 50, 50]),
            ([340, 330, 330], [340, 170, 170, 160, 160]),
            ([600, 200, 200], [600, 100, 100, 100, 100]),
        ],
    )
    def test_fifth_category_never_lowers_score(self, scorer, three, five):
        three_totals = [CategoryTotal(f"c{i}", b) for i, b in enumerate(three)]
        five_totals = [CategoryTotal(f"c{i}", b) for i, b in enumerate(five)]
        assert max(three) == max(five)
        assert scorer.score(five_totals, sum(five)).score >= scorer.score(three_totals, sum(three)).score


class TestTiers:
    @pytest.mark.parametrize(
        "score,advice",
        [(100, ADVICE_IDEAL), (81, ADVICE_IDEAL), (80, ADVICE_SLIGHT_SKEW), (61, ADVICE_SLIGHT_SKEW), (60, ADVICE_CONCENTRATED)],
    )
    def test_advice_boundaries(self, scorer, score, advice):
        assert scorer.advice_for(score) == advice

    @pytest.mark.parametrize(
        "score,status",
        [(76, HealthStatus.GOOD), (75, HealthStatus.CAUTION), (51, HealthStatus.CAUTION), (50, HealthStatus.ALERT)],
    )
    def test_status_boundaries(self, scorer, score, status):
        assert scorer.status_for(score) == status
