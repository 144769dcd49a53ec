"""Pydantic models for config validation.

``Config.validated()`` returns a typed ``FinproConfig``; ``Config.analytics()``
returns just the ``AnalyticsConfig`` section that the dashboard engine is
built from. Existing dict-based access continues to work unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from finpro.financial.calculators import tables


class PathsConfig(BaseModel):
    """File-system paths used by the application."""

    log_dir: Path | None = None
    snapshot: Path | None = None

    @field_validator("log_dir", "snapshot", mode="before")
    @classmethod
    def _expand_user(cls, v: Any) -> Any:
        if v == "":
            return None
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v


class LoggingConfig(BaseModel):
    """Log level and optional log file."""

    level: str = "WARNING"
    file: str = ""


class AnalyticsConfig(BaseModel):
    """Read-only tables and constants consumed by the analytics calculators."""

    model_config = ConfigDict(frozen=True)

    yields: dict[str, float] = Field(default_factory=lambda: dict(tables.DEFAULT_YIELD_ASSUMPTIONS))
    allocation_targets: dict[str, float] = Field(default_factory=lambda: dict(tables.DEFAULT_ALLOCATION_TARGETS))
    volatility: float = Field(default=tables.PROJECTION_VOLATILITY, ge=0.0)
    z_score: float = Field(default=tables.PERCENTILE_Z_SCORE, ge=0.0)
    rebalance_tolerance_points: float = Field(default=tables.REBALANCE_TOLERANCE_POINTS, ge=0.0)
    forecast_lookahead_months: int = Field(default=tables.FORECAST_LOOKAHEAD_MONTHS, ge=0)

    @field_validator("yields", "allocation_targets")
    @classmethod
    def _fractions(cls, v: dict[str, float]) -> dict[str, float]:
        bad = {k: w for k, w in v.items() if not 0.0 <= w <= 1.0}
        if bad:
            raise ValueError(f"values must be fractions in [0, 1], got {bad}")
        return v

    def yield_table(self) -> Mapping[str, float]:
        return MappingProxyType(dict(self.yields))

    def target_table(self) -> Mapping[str, float]:
        return MappingProxyType(dict(self.allocation_targets))


class FinproConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so consumers can bolt on custom sections
    without touching this schema.
    """

    model_config = ConfigDict(extra="allow")

    paths: PathsConfig = PathsConfig()
    logging: LoggingConfig = LoggingConfig()
    analytics: AnalyticsConfig = AnalyticsConfig()
