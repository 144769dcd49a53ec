"""Tests for finpro.financial.models."""

from datetime import date
from decimal import Decimal

import pytest

from finpro.financial.models import Goal, HoldingRecord, PortfolioSnapshot, YearMonth, coerce_money


class TestCoerceMoney:
    @pytest.mark.parametrize("raw", [None, "", "n/a", "1,000", float("nan"), float("inf"), True])
    def test_invalid_becomes_zero(self, raw):
        assert coerce_money(raw) == 0

    def test_numeric_strings(self):
        assert coerce_money("1500") == 1500
        assert coerce_money(" 42 ") == 42

    def test_floors_fractions(self):
        assert coerce_money(99.9) == 99
        assert coerce_money(Decimal("10.5")) == 10
        assert coerce_money(-0.5) == -1

    def test_int_passthrough(self):
        assert coerce_money(10**18) == 10**18


class TestYearMonth:
    def test_parse_slash_and_dash(self):
        assert YearMonth.parse("2024/02") == YearMonth(2024, 2)
        assert YearMonth.parse("2024-2") == YearMonth(2024, 2)

    def test_parse_rejects_garbage(self):
        with pytest.raises(ValueError):
            YearMonth.parse("Feb 2024")

    def test_invalid_month(self):
        with pytest.raises(ValueError, match="1..12"):
            YearMonth(2024, 13)

    def test_str(self):
        assert str(YearMonth(2024, 2)) == "2024/02"

    def test_shift_across_year(self):
        assert YearMonth(2024, 11).shift(3) == YearMonth(2025, 2)
        assert YearMonth(2024, 1).shift(-1) == YearMonth(2023, 12)

    def test_ordering(self):
        assert YearMonth(2023, 12) < YearMonth(2024, 1)
        assert YearMonth(2024, 3) >= YearMonth(2024, 3)
        assert sorted([YearMonth(2024, 5), YearMonth(2023, 7)])[0] == YearMonth(2023, 7)

    def test_from_date(self):
        assert YearMonth.from_date(date(2026, 10, 18)) == YearMonth(2026, 10)


class TestHoldingRecord:
    def test_coerces_balance_and_month(self):
        record = HoldingRecord("2024/02", "Cash", "Bank", "abc")
        assert record.month == YearMonth(2024, 2)
        assert record.balance == 0

    def test_immutable(self):
        record = HoldingRecord(YearMonth(2024, 2), "Cash", "Bank", 100)
        with pytest.raises(AttributeError):
            record.balance = 200

    def test_memo_optional(self):
        assert HoldingRecord(YearMonth(2024, 2), "Cash", "Bank", 1).memo is None


class TestGoal:
    def test_deadline_parsed(self):
        goal = Goal("Car", "Savings", 3_000_000, "2024-06-30")
        assert goal.deadline == date(2024, 6, 30)

    def test_target_coerced(self):
        assert Goal("Car", "Savings", "3000000", date(2024, 6, 30)).target == 3_000_000


class TestPortfolioSnapshot:
    def test_lists_become_tuples(self):
        snap = PortfolioSnapshot([], [], [], "2024/02")
        assert snap.latest_holdings == ()
        assert snap.latest_month == YearMonth(2024, 2)
        assert snap.goals == ()
