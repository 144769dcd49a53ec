"""
Analytics Tables - default configuration constants for the dashboard engine.

Single source of truth for the fixed tables and thresholds the calculators
consume. This module has NO dependencies on other modules to prevent import
cycles. Calculators receive these values at construction, so tests (or a
config file) can substitute their own.

All tables are exposed read-only.
"""

from types import MappingProxyType

# =============================================================================
# ASSET CATEGORIES
# =============================================================================

CASH = "Cash"
SECURITIES = "Securities"
CRYPTO = "Crypto"
INSURANCE_PENSION = "Insurance & Pension"
OTHER = "Other"

CATEGORIES = (CASH, SECURITIES, CRYPTO, INSURANCE_PENSION, OTHER)

# =============================================================================
# YIELD ASSUMPTIONS (annual yield fraction per category)
# =============================================================================
# Categories absent from the table yield 0.

DEFAULT_YIELD_ASSUMPTIONS = MappingProxyType(
    {
        CASH: 0.001,  # ordinary deposit interest
        SECURITIES: 0.02,  # dividend / distribution yield
        CRYPTO: 0.0,
        INSURANCE_PENSION: 0.01,  # guaranteed crediting rate
    }
)

# =============================================================================
# ALLOCATION TARGETS (fraction of total assets per category)
# =============================================================================
# Need not sum to 1; residual categories simply receive a target of 0.

DEFAULT_ALLOCATION_TARGETS = MappingProxyType(
    {
        CASH: 0.20,
        SECURITIES: 0.60,
        CRYPTO: 0.05,
        INSURANCE_PENSION: 0.15,
    }
)

# =============================================================================
# DIVERSIFICATION SCORING
# =============================================================================

SCORE_BASE = 50
SCORE_MIN = 0
SCORE_MAX = 100
BROAD_CATEGORY_COUNT = 4  # n >= 4 earns the breadth bonus
BREADTH_BONUS = 20
BALANCED_MAX_WEIGHT = 0.4  # largest weight below this earns the balance bonus
BALANCE_BONUS = 30
CONCENTRATED_MAX_WEIGHT = 0.7  # largest weight above this is penalised
CONCENTRATION_PENALTY = 30

ADVICE_IDEAL_ABOVE = 80
ADVICE_FINE_ABOVE = 60
STATUS_GOOD_ABOVE = 75
STATUS_CAUTION_ABOVE = 50

# =============================================================================
# REBALANCING / FORECASTING / PROJECTION
# =============================================================================

REBALANCE_TOLERANCE_POINTS = 3.0  # |diff| strictly below this is "Perfect"
FORECAST_LOOKAHEAD_MONTHS = 3  # window = current month + next 3

PROJECTION_VOLATILITY = 0.15
PERCENTILE_Z_SCORE = 1.28  # ~90th / 10th percentile of a standard normal

# =============================================================================
# SIMULATOR INPUT RANGES (enforced by the input layer, never by the engine)
# =============================================================================

MONTHLY_SAVINGS_MIN = 0
MONTHLY_SAVINGS_MAX = 1_000_000
MONTHLY_SAVINGS_STEP = 10_000

ANNUAL_RETURN_MIN = 0.0
ANNUAL_RETURN_MAX = 0.20
ANNUAL_RETURN_STEP = 0.005

HORIZON_YEARS_MIN = 1
HORIZON_YEARS_MAX = 50
