"""Dashboard orchestration: runs every calculator over one snapshot.

This is the caller-owned layer between the data-access collaborator and the
presentation layer. Each call recomputes everything from scratch; nothing is
memoized and no component holds mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from finpro.financial.calculators import (
    CashFlowForecaster,
    CashFlowPoint,
    DiversificationScorer,
    GoalProgress,
    GrowthProjector,
    HealthScore,
    IncomeEstimate,
    ProjectionPoint,
    RebalanceAnalyzer,
    RebalancePlan,
    SimulationParams,
    YieldEstimator,
    aggregate_holdings,
    track_goals,
)
from finpro.financial.models import CategoryTotal, PortfolioSnapshot, YearMonth


@dataclass(frozen=True)
class DashboardReport:
    """Plain-data results for one snapshot. No currency formatting applied."""

    month: YearMonth
    totals: tuple[CategoryTotal, ...]
    total_assets: int
    health: HealthScore
    income: IncomeEstimate
    rebalance: RebalancePlan
    cash_flow: tuple[CashFlowPoint, ...]
    goals: tuple[GoalProgress, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Render as JSON-friendly primitives (enums -> values, months -> "YYYY/MM")."""
        return {
            "month": str(self.month),
            "total_assets": self.total_assets,
            "totals": [{"category": t.category, "balance": t.balance} for t in self.totals],
            "health": {
                "score": self.health.score,
                "advice": self.health.advice,
                "status": self.health.status.value,
                "category_count": self.health.category_count,
                "max_weight": self.health.max_weight,
            },
            "income": {
                "annual": self.income.annual_income,
                "monthly": self.income.monthly_income,
                "daily": self.income.daily_income,
            },
            "rebalance": {
                "total_rebalance_amount": self.rebalance.total_rebalance_amount,
                "entries": [
                    {
                        "category": e.category,
                        "current_weight": e.current_weight,
                        "target_weight": e.target_weight,
                        "diff_percent_points": e.diff_percent_points,
                        "diff_amount": e.diff_amount,
                        "status": e.status.value,
                    }
                    for e in self.rebalance.entries
                ],
            },
            "cash_flow": [{"month": str(p.month), "amount": p.amount, "type": p.type.value} for p in self.cash_flow],
            "goals": [
                {
                    "name": g.goal.name,
                    "category": g.goal.category,
                    "target": g.goal.target,
                    "deadline": g.goal.deadline.isoformat(),
                    "percent": g.percent,
                    "remaining": g.remaining,
                }
                for g in self.goals
            ],
        }


def projection_to_dicts(points: list[ProjectionPoint]) -> list[dict[str, Any]]:
    return [
        {
            "year_offset": p.year_offset,
            "calendar_year": p.calendar_year,
            "median": p.median,
            "optimistic": p.optimistic,
            "pessimistic": p.pessimistic,
        }
        for p in points
    ]


class PortfolioDashboard:
    """Wire the calculators together from one read-only analytics config.

    Args:
        analytics: An ``AnalyticsConfig`` (see ``finpro.core.config_schema``).
            Defaults to the built-in tables.
    """

    def __init__(self, analytics=None):
        if analytics is None:
            from finpro.core.config_schema import AnalyticsConfig

            analytics = AnalyticsConfig()
        self.analytics = analytics
        self.scorer = DiversificationScorer()
        self.yield_estimator = YieldEstimator(analytics.yield_table())
        self.rebalancer = RebalanceAnalyzer(
            analytics.target_table(),
            tolerance_points=analytics.rebalance_tolerance_points,
        )
        self.forecaster = CashFlowForecaster(lookahead_months=analytics.forecast_lookahead_months)
        self.projector = GrowthProjector(volatility=analytics.volatility, z_score=analytics.z_score)

    def build_report(self, snapshot: PortfolioSnapshot, current_month: YearMonth | None = None) -> DashboardReport:
        month = current_month or snapshot.latest_month
        summary = aggregate_holdings(snapshot.latest_holdings)
        report = DashboardReport(
            month=month,
            totals=summary.totals,
            total_assets=summary.total_assets,
            health=self.scorer.score(summary.totals, summary.total_assets),
            income=self.yield_estimator.estimate(summary.totals),
            rebalance=self.rebalancer.analyze(summary.totals, summary.total_assets),
            cash_flow=tuple(self.forecaster.forecast(snapshot.historical_holdings, month, summary.total_assets)),
            goals=tuple(track_goals(snapshot.goals, summary.total_assets)),
        )
        logger.info(
            f"Report for {month}: total {report.total_assets:,}, "
            f"score {report.health.score} ({report.health.status.value})"
        )
        return report

    def project(
        self, total_assets: int, params: SimulationParams, start_year: int | None = None
    ) -> list[ProjectionPoint]:
        return self.projector.project_params(total_assets, params, start_year=start_year)
