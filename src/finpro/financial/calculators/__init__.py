"""Portfolio calculators for holdings, scoring, income, rebalancing, cash flow, growth and goals."""

from .cashflow import CashFlowForecaster, CashFlowPoint, FlowType
from .diversification import DiversificationScorer, HealthScore, HealthStatus, ScoringThresholds
from .goals import GoalProgress, goal_progress, track_goals
from .growth import GrowthProjector, ProjectionPoint, SimulationParams
from .holdings import aggregate_holdings, guarded_total
from .income import IncomeEstimate, YieldEstimator
from .rebalance import RebalanceAnalyzer, RebalanceEntry, RebalancePlan, RebalanceStatus
from .tables import DEFAULT_ALLOCATION_TARGETS, DEFAULT_YIELD_ASSUMPTIONS

__all__ = [
    "DEFAULT_ALLOCATION_TARGETS",
    "DEFAULT_YIELD_ASSUMPTIONS",
    "CashFlowForecaster",
    "CashFlowPoint",
    "DiversificationScorer",
    "FlowType",
    "GoalProgress",
    "GrowthProjector",
    "HealthScore",
    "HealthStatus",
    "IncomeEstimate",
    "ProjectionPoint",
    "RebalanceAnalyzer",
    "RebalanceEntry",
    "RebalancePlan",
    "RebalanceStatus",
    "ScoringThresholds",
    "SimulationParams",
    "YieldEstimator",
    "aggregate_holdings",
    "goal_progress",
    "guarded_total",
    "track_goals",
]
