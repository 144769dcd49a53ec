"""
Growth projection of portfolio value with optimistic, median and pessimistic paths.

Median path: future value of the present lump sum plus an ordinary annuity of
annual contributions (monthly savings * 12), compounded at the expected
annual return r:

    median(t) = floor(P * (1+r)^t + C * ((1+r)^t - 1) / r)      (C * t when r == 0)

Dispersion bands: a log-normal shock with drift (r - sigma^2/2) * t and
spread sigma * sqrt(t), evaluated at z = +/-1.28 (roughly the 90th / 10th
percentiles of a standard normal):

    optimistic(t)  = floor(R(t) * exp(drift + 1.28 * spread))
    pessimistic(t) = floor(R(t) * exp(drift - 1.28 * spread))

Note that R(t) = P + C * t is the *uncompounded* running total (lump sum plus
contributions to date), not the compounded median. The bands therefore
are not percentiles of the same process as the median; this simplification
is kept deliberately and is not a geometric-Brownian-motion Monte Carlo.

Pure math with no state and no randomness. Identical inputs give identical paths.
"""

import math
from dataclasses import dataclass

from finpro.financial.calculators import tables


@dataclass(frozen=True)
class SimulationParams:
    """One consistent set of user-tunable projection inputs.

    Hashable, so callers may cache projections by it. Range and step limits
    are applied by ``clamped()`` at the input boundary; the projector itself
    never validates.
    """

    monthly_savings: int
    annual_return_rate: float  # e.g. 0.05 for 5%
    horizon_years: int

    @classmethod
    def clamped(cls, monthly_savings: float, annual_return_rate: float, horizon_years: int) -> "SimulationParams":
        """Snap raw slider-style inputs onto the allowed ranges and steps."""
        savings_steps = round(monthly_savings / tables.MONTHLY_SAVINGS_STEP)
        savings = savings_steps * tables.MONTHLY_SAVINGS_STEP
        savings = max(tables.MONTHLY_SAVINGS_MIN, min(tables.MONTHLY_SAVINGS_MAX, savings))

        rate_steps = round(annual_return_rate / tables.ANNUAL_RETURN_STEP)
        rate = round(rate_steps * tables.ANNUAL_RETURN_STEP, 4)
        rate = max(tables.ANNUAL_RETURN_MIN, min(tables.ANNUAL_RETURN_MAX, rate))

        years = max(tables.HORIZON_YEARS_MIN, min(tables.HORIZON_YEARS_MAX, int(horizon_years)))
        return cls(monthly_savings=int(savings), annual_return_rate=rate, horizon_years=years)


@dataclass(frozen=True)
class ProjectionPoint:
    """Projected portfolio value ``year_offset`` years from now."""

    year_offset: int
    median: int
    optimistic: int
    pessimistic: int
    calendar_year: int | None = None


class GrowthProjector:
    """Project portfolio value year by year under a drift-volatility model."""

    def __init__(
        self,
        volatility: float = tables.PROJECTION_VOLATILITY,
        z_score: float = tables.PERCENTILE_Z_SCORE,
    ):
        self.volatility = volatility
        self.z_score = z_score

    def median_value(self, total_assets: int, annual_contribution: float, rate: float, years: int) -> int:
        """Compounded lump sum plus annuity of annual contributions."""
        growth = (1 + rate) ** years
        base = total_assets * growth
        if rate == 0:
            contributions = annual_contribution * years
        else:
            contributions = annual_contribution * (growth - 1) / rate
        return math.floor(base + contributions)

    def band_values(self, total_assets: int, annual_contribution: float, rate: float, years: int) -> tuple[int, int]:
        """Return (optimistic, pessimistic) for one year offset."""
        running_total = total_assets + annual_contribution * years
        drift = (rate - 0.5 * self.volatility**2) * years
        spread = self.volatility * math.sqrt(years) * self.z_score
        optimistic = math.floor(running_total * math.exp(drift + spread))
        pessimistic = math.floor(running_total * math.exp(drift - spread))
        return optimistic, pessimistic

    def project(
        self,
        total_assets: int,
        monthly_savings: float,
        annual_return_rate: float,
        horizon_years: int,
        start_year: int | None = None,
    ) -> list[ProjectionPoint]:
        """
        Project year offsets 0..horizon_years inclusive.

        Args:
            total_assets: Present portfolio value.
            monthly_savings: Contribution per month (>= 0).
            annual_return_rate: Expected annual return as a fraction.
            horizon_years: Number of years to project (>= 0).
            start_year: Calendar year of offset 0; labels each point when given.

        Returns:
            One ProjectionPoint per year, ascending. At offset 0 all three
            paths equal total_assets.
        """
        annual_contribution = monthly_savings * 12
        points = []
        for t in range(horizon_years + 1):
            median = self.median_value(total_assets, annual_contribution, annual_return_rate, t)
            optimistic, pessimistic = self.band_values(total_assets, annual_contribution, annual_return_rate, t)
            points.append(
                ProjectionPoint(
                    year_offset=t,
                    median=median,
                    optimistic=optimistic,
                    pessimistic=pessimistic,
                    calendar_year=start_year + t if start_year is not None else None,
                )
            )
        return points

    def project_params(
        self, total_assets: int, params: SimulationParams, start_year: int | None = None
    ) -> list[ProjectionPoint]:
        return self.project(
            total_assets,
            params.monthly_savings,
            params.annual_return_rate,
            params.horizon_years,
            start_year=start_year,
        )
