"""Tests for finpro.financial.calculators.cashflow."""

from finpro.financial.calculators.cashflow import CashFlowForecaster, CashFlowPoint, FlowType
from finpro.financial.models import HoldingRecord, YearMonth

FEB = YearMonth(2024, 2)


def _rec(month, balance, category="Cash", label="Bank"):
    return HoldingRecord(month, category, label, balance)


class TestCashFlowForecaster:
    def test_window(self):
        months = CashFlowForecaster().window(YearMonth(2024, 11))
        assert months == [YearMonth(2024, 11), YearMonth(2024, 12), YearMonth(2025, 1), YearMonth(2025, 2)]

    def test_actual_and_projected(self):
        history = [
            _rec(YearMonth(2024, 1), 999),  # before the window
            _rec(FEB, 1000),
            _rec(FEB, 500, label="Other bank"),
            _rec(YearMonth(2024, 4), 300),
            _rec(YearMonth(2024, 6), 777),  # after the window
        ]
        points = CashFlowForecaster().forecast(history, FEB, total_assets=5000)
        assert points == [
            CashFlowPoint(FEB, 1500, FlowType.ACTUAL),
            CashFlowPoint(YearMonth(2024, 4), 300, FlowType.PROJECTED),
        ]

    def test_current_month_falls_back_to_total(self):
        history = [_rec(YearMonth(2024, 3), 200)]
        points = CashFlowForecaster().forecast(history, FEB, total_assets=9_530_000)
        assert points[0] == CashFlowPoint(FEB, 9_530_000, FlowType.ACTUAL)
        assert points[1] == CashFlowPoint(YearMonth(2024, 3), 200, FlowType.PROJECTED)

    def test_zero_sum_future_months_dropped(self):
        history = [_rec(YearMonth(2024, 3), 100), _rec(YearMonth(2024, 3), -100)]
        points = CashFlowForecaster().forecast(history, FEB, total_assets=10)
        assert [p.month for p in points] == [FEB]

    def test_empty_history(self):
        points = CashFlowForecaster().forecast([], FEB, total_assets=0)
        assert points == [CashFlowPoint(FEB, 0, FlowType.ACTUAL)]

    def test_chronological(self):
        history = [_rec(YearMonth(2024, 5), 1), _rec(YearMonth(2024, 3), 1), _rec(FEB, 1)]
        points = CashFlowForecaster().forecast(history, FEB, total_assets=0)
        assert [p.month for p in points] == sorted(p.month for p in points)

    def test_custom_lookahead(self):
        history = [_rec(YearMonth(2024, 8), 50)]
        assert len(CashFlowForecaster(lookahead_months=6).forecast(history, FEB, 1)) == 2
        assert len(CashFlowForecaster(lookahead_months=0).forecast(history, FEB, 1)) == 1
