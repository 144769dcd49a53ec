"""Tests for finpro.financial.calculators.holdings."""

import random

from finpro.financial.calculators.holdings import aggregate_holdings, guarded_total
from finpro.financial.models import CategoryTotal, HoldingRecord, YearMonth

MONTH = YearMonth(2024, 2)


class TestAggregateHoldings:
    def test_sample_snapshot(self, latest_holdings):
        summary = aggregate_holdings(latest_holdings)
        assert summary.total_assets == 9_530_000
        assert summary.totals == (
            CategoryTotal("Cash", 1_850_000),
            CategoryTotal("Securities", 4_650_000),
            CategoryTotal("Crypto", 920_000),
            CategoryTotal("Insurance & Pension", 2_110_000),
        )

    def test_first_seen_order(self):
        records = [
            HoldingRecord(MONTH, "B", "b1", 1),
            HoldingRecord(MONTH, "A", "a1", 2),
            HoldingRecord(MONTH, "B", "b2", 3),
        ]
        summary = aggregate_holdings(records)
        assert [t.category for t in summary.totals] == ["B", "A"]
        assert summary.totals[0].balance == 4

    def test_empty(self):
        summary = aggregate_holdings([])
        assert summary.totals == ()
        assert summary.total_assets == 0

    def test_invalid_balances_count_as_zero(self):
        records = [
            HoldingRecord(MONTH, "Cash", "Bank", "oops"),
            HoldingRecord(MONTH, "Cash", "Wallet", None),
            HoldingRecord(MONTH, "Cash", "Box", 500),
        ]
        summary = aggregate_holdings(records)
        assert summary.totals == (CategoryTotal("Cash", 500),)
        assert summary.total_assets == 500

    def test_conservation(self):
        rng = random.Random(7)
        categories = ["Cash", "Securities", "Crypto", "Insurance & Pension", "Other"]
        for _ in range(200):
            records = [
                HoldingRecord(MONTH, rng.choice(categories), f"acct{i}", rng.randint(0, 10**12))
                for i in range(rng.randint(0, 20))
            ]
            summary = aggregate_holdings(records)
            assert sum(t.balance for t in summary.totals) == summary.total_assets
            assert summary.total_assets == sum(r.balance for r in records)


def test_guarded_total():
    assert guarded_total(0) == 1
    assert guarded_total(-10) == 1
    assert guarded_total(5000) == 5000
