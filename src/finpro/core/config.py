"""
Hierarchical configuration management.

Loads configuration from multiple sources with this precedence (highest wins):
    1. Environment variables (PREFIX_SECTION__KEY)
    2. Config file (YAML or JSON)
    3. Built-in defaults

Usage:
    config = Config(config_file="finpro.yaml")

    config.get("analytics.volatility")     # dot-notation access
    config.analytics()                      # validated AnalyticsConfig
"""

import json
import os
from typing import Any

import yaml
from loguru import logger

from finpro.core.exceptions import ConfigurationError
from finpro.financial.calculators import tables

_DEFAULT_ENV_PREFIX = "FINPRO_"


class Config:
    """
    Central configuration manager.

    Loads and merges configuration from defaults, a config file, and
    environment variables. Env vars use double-underscore to denote nesting:
    FINPRO_ANALYTICS__VOLATILITY=0.2 -> config["analytics"]["volatility"] = "0.2"
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = _DEFAULT_ENV_PREFIX,
        defaults: dict[str, Any] | None = None,
    ):
        """
        Args:
            config_file: Path to YAML or JSON configuration file.
            env_prefix: Prefix for environment variable overrides.
            defaults: Additional default values to merge (consumer-specific).
        """
        self.config_file = config_file
        self.env_prefix = env_prefix or ""
        self._extra_defaults = defaults or {}
        self.config_data: dict[str, Any] = {}

        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from all sources."""
        self.config_data = self._get_default_config()

        if self._extra_defaults:
            self._update_dict(self.config_data, self._extra_defaults)

        if self.config_file:
            if os.path.exists(self.config_file):
                file_config = self._load_file(self.config_file)
                self._update_dict(self.config_data, file_config)
            else:
                logger.warning(f"Config file not found, using defaults: {self.config_file}")

        # Env vars override everything
        self._load_from_env()

    def _get_default_config(self) -> dict[str, Any]:
        """Build default configuration from the analytics tables."""
        return {
            "paths": {
                "log_dir": "",
                "snapshot": "",
            },
            "logging": {
                "level": "WARNING",
                "file": "",
            },
            "analytics": {
                "yields": dict(tables.DEFAULT_YIELD_ASSUMPTIONS),
                "allocation_targets": dict(tables.DEFAULT_ALLOCATION_TARGETS),
                "volatility": tables.PROJECTION_VOLATILITY,
                "z_score": tables.PERCENTILE_Z_SCORE,
                "rebalance_tolerance_points": tables.REBALANCE_TOLERANCE_POINTS,
                "forecast_lookahead_months": tables.FORECAST_LOOKAHEAD_MONTHS,
            },
        }

    @staticmethod
    def _load_file(path: str) -> dict[str, Any]:
        """Load a YAML or JSON config file."""
        ext = os.path.splitext(path)[1].lower()
        try:
            with open(path) as f:
                if ext in (".yaml", ".yml"):
                    return yaml.safe_load(f) or {}
                elif ext == ".json":
                    return json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not parse config file {path}: {e}") from e
        return {}

    def _update_dict(self, target: dict, source: dict) -> None:
        """Recursively merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict(target[key], value)
            else:
                target[key] = value

    def _load_from_env(self) -> None:
        """Override config values from environment variables."""
        if not self.env_prefix:
            return
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(self.env_prefix):
                continue
            config_key = env_key[len(self.env_prefix) :].lower()
            key_parts = config_key.split("__")

            current = self.config_data
            for part in key_parts[:-1]:
                if part not in current or not isinstance(current[part], dict):
                    current[part] = {}
                current = current[part]
            current[key_parts[-1]] = env_value

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dot-notation path.

        Args:
            key_path: e.g. "analytics.volatility", "paths.snapshot"
            default: Returned when key is not found.
        """
        parts = key_path.split(".")
        current = self.config_data
        for part in parts:
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key_path: str, value: Any) -> None:
        """Set a config value by dot-notation path, creating intermediate dicts."""
        parts = key_path.split(".")
        current = self.config_data
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value

    def validated(self):
        """Return the whole configuration as a validated ``FinproConfig``."""
        from pydantic import ValidationError

        from finpro.core.config_schema import FinproConfig

        try:
            return FinproConfig.model_validate(self.config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def analytics(self):
        """Return the validated ``AnalyticsConfig`` section."""
        return self.validated().analytics
