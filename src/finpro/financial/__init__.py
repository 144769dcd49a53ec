"""Financial analytics: holdings models, calculators and the dashboard engine."""

from .dashboard import DashboardReport, PortfolioDashboard
from .models import CategoryTotal, Goal, HoldingRecord, HoldingsSummary, PortfolioSnapshot, YearMonth

__all__ = [
    "CategoryTotal",
    "DashboardReport",
    "Goal",
    "HoldingRecord",
    "HoldingsSummary",
    "PortfolioDashboard",
    "PortfolioSnapshot",
    "YearMonth",
]
