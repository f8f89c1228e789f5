"""
Unified configuration management for Form6.

This module provides:
- Environment-aware configuration (development, staging, production, test)
- YAML config loading with environment-specific overlays
- Environment variable overrides
- Pydantic models for type-safe access

Usage:
    from form6.utils.config import get_config

    config = get_config()
    filings_dir = config.filings_dir
    policy = config.settings.context_policy
"""

import os
from enum import Enum
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions import ConfigurationError


# =============================================================================
# Environment Definition
# =============================================================================

class Environment(Enum):
    """Environment types."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


# =============================================================================
# Pydantic Config Models (for type-safe access)
# =============================================================================

class FilingsConfig(BaseModel):
    """Configuration for the filing source directory."""
    source_dir: str = Field(default="data/filings")
    extension: str = Field(default=".xbrl")
    excluded_names: list[str] = Field(default=["rssfeed"])
    name_suffix_marker: str = Field(default="_form6_Q")
    report_year: int = Field(default=2024)


class ContextPolicyConfig(BaseModel):
    """Tokens recognised as the current reporting context."""
    primary_context: str = Field(default="C1")
    secondary_context: str = Field(default="C2")
    current_marker: str = Field(default="Current")
    current_year: str = Field(default="2024")


class DetailReportConfig(BaseModel):
    """Configuration for detail report assembly."""
    state_code_max_length: int = Field(default=3)
    unknown_endpoint: str = Field(default="Unknown")
    mileage_policy: Literal["segments_first", "pipelines_only"] = Field(default="segments_first")


class ValuationWeights(BaseModel):
    """Relative weights of the three valuation approaches (percent)."""
    cost: float = Field(default=30.0)
    income: float = Field(default=50.0)
    market: float = Field(default=20.0)


class ValuationConfig(BaseModel):
    """Defaults for the valuation calculator."""
    weights: ValuationWeights = Field(default_factory=ValuationWeights)
    projection_years: int = Field(default=20)
    terminal_growth_pct: float = Field(default=2.0)
    geographic_adjustment_pct: float = Field(default=2.0)
    economic_obsolescence_pct: float = Field(default=3.0)
    fallback_replacement_cost: float = Field(default=80_000_000.0)
    fallback_revenue: float = Field(default=15_000_000.0)
    fallback_expenses: float = Field(default=8_000_000.0)
    fallback_ebitda: float = Field(default=9_000_000.0)


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = Field(default="INFO")
    log_path: str = Field(default="logs")
    max_log_files: int = Field(default=30)
    log_format: str = Field(default="json")


class Settings(BaseModel):
    """Main settings container."""
    filings: FilingsConfig = Field(default_factory=FilingsConfig)
    context_policy: ContextPolicyConfig = Field(default_factory=ContextPolicyConfig)
    detail_report: DetailReportConfig = Field(default_factory=DetailReportConfig)
    valuation: ValuationConfig = Field(default_factory=ValuationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class EnvSettings(BaseSettings):
    """Environment variable settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    form6_env: str = Field(default="development")
    form6_filings_dir: Optional[str] = Field(default=None)
    form6_log_level: Optional[str] = Field(default=None)
    form6_report_year: Optional[str] = Field(default=None)


# =============================================================================
# Unified AppConfig Class
# =============================================================================

class AppConfig:
    """
    Unified configuration manager for Form6.

    Combines:
    - Environment-aware configuration (dev/staging/prod/test)
    - YAML config loading with environment overlays
    - Environment variable overrides
    - Type-safe Pydantic settings

    Usage:
        config = get_config()
        print(config.filings_dir)
        print(config.is_production)
    """

    def __init__(self, env: Optional[str] = None):
        """
        Initialize unified configuration.

        Args:
            env: Environment name. Defaults to FORM6_ENV or 'development'.
        """
        self._env_settings = EnvSettings()

        self._env_name = env or os.getenv("FORM6_ENV") or self._env_settings.form6_env
        try:
            self._environment = Environment(self._env_name)
        except ValueError:
            self._environment = Environment.DEVELOPMENT

        # Raw config dict (for dot-notation access)
        self._config: dict[str, Any] = {}

        self._load_config()
        self._settings = self._create_settings()

    def _load_config(self) -> None:
        """Load configuration files with environment overlay."""
        config_dir = get_project_root() / "config"

        base_path = config_dir / "settings.yaml"
        if base_path.exists():
            with open(base_path) as f:
                self._config = yaml.safe_load(f) or {}

        env_path = config_dir / f"settings.{self._environment.value}.yaml"
        if env_path.exists():
            with open(env_path) as f:
                env_config = yaml.safe_load(f) or {}
            self._deep_merge(self._config, env_config)

        self._apply_env_overrides()

    def _deep_merge(self, base: dict, overlay: dict) -> None:
        """Deep merge overlay dict into base dict."""
        for key, value in overlay.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides."""
        if filings_dir := os.getenv("FORM6_FILINGS_DIR") or self._env_settings.form6_filings_dir:
            self._set_nested("filings.source_dir", filings_dir)

        if log_level := os.getenv("FORM6_LOG_LEVEL") or self._env_settings.form6_log_level:
            self._set_nested("logging.level", log_level)

        report_year = os.getenv("FORM6_REPORT_YEAR") or self._env_settings.form6_report_year
        if report_year:
            try:
                year = int(report_year)
            except ValueError as e:
                raise ConfigurationError(
                    "FORM6_REPORT_YEAR must be a year", {"value": report_year}
                ) from e
            self._set_nested("filings.report_year", year)
            self._set_nested("context_policy.current_year", str(report_year))

    def _set_nested(self, path: str, value: Any) -> None:
        """Set nested dictionary value using dot notation."""
        keys = path.split(".")
        d = self._config
        for key in keys[:-1]:
            d = d.setdefault(key, {})
        d[keys[-1]] = value

    def _create_settings(self) -> Settings:
        """Create typed Settings object from config dict."""
        return Settings(**self._config)

    # -------------------------------------------------------------------------
    # Public Properties
    # -------------------------------------------------------------------------

    @property
    def environment(self) -> Environment:
        """Current environment."""
        return self._environment

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self._environment == Environment.PRODUCTION

    @property
    def is_test(self) -> bool:
        """Check if running in test."""
        return self._environment == Environment.TEST

    @property
    def settings(self) -> Settings:
        """Get typed settings object."""
        return self._settings

    @property
    def filings_dir(self) -> Path:
        """Get absolute filing source directory."""
        return get_absolute_path(self._settings.filings.source_dir)

    # -------------------------------------------------------------------------
    # Access Methods
    # -------------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key: Config key (e.g., 'filings.source_dir').
            default: Default value if not found.

        Returns:
            Configuration value.
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_filings_config(self) -> dict[str, Any]:
        """Get filing source configuration dict."""
        return {
            "source_dir": str(self.filings_dir),
            "extension": self._settings.filings.extension,
            "excluded_names": list(self._settings.filings.excluded_names),
            "name_suffix_marker": self._settings.filings.name_suffix_marker,
            "report_year": self._settings.filings.report_year,
        }

    def get_context_policy_config(self) -> dict[str, Any]:
        """Get current-context policy configuration dict."""
        return self._settings.context_policy.model_dump()

    def get_valuation_config(self) -> dict[str, Any]:
        """Get valuation defaults dict."""
        return self._settings.valuation.model_dump()

    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid).
        """
        errors = []

        if not self.filings_dir.is_dir():
            errors.append(f"Filing source directory does not exist: {self.filings_dir}")

        if not self._settings.filings.extension.startswith("."):
            errors.append(
                f"Filing extension must start with '.': {self._settings.filings.extension}"
            )

        weights = self._settings.valuation.weights
        if weights.cost + weights.income + weights.market <= 0:
            errors.append("Valuation weights must sum to a positive number")

        valuation = self._settings.valuation
        if valuation.projection_years < 1:
            errors.append(f"Invalid projection period: {valuation.projection_years}")

        return errors


# =============================================================================
# Global Instances and Accessor Functions
# =============================================================================

_config: Optional[AppConfig] = None


def get_project_root() -> Path:
    """Get the project root directory."""
    current = Path(__file__).resolve()
    for parent in [current] + list(current.parents):
        if (parent / "config").exists() and (parent / "form6").exists():
            return parent
    return Path.cwd()


def get_absolute_path(relative_path: str) -> Path:
    """
    Convert a relative path to absolute path from project root.

    Args:
        relative_path: Path relative to project root.

    Returns:
        Absolute Path object.
    """
    path = Path(relative_path)
    if path.is_absolute():
        return path
    return get_project_root() / path


def get_config(env: Optional[str] = None) -> AppConfig:
    """
    Get the unified configuration instance.

    Args:
        env: Optional environment override.

    Returns:
        AppConfig instance.
    """
    global _config
    if _config is None or env is not None:
        _config = AppConfig(env=env)
    return _config


def get_settings() -> Settings:
    """Get the current settings instance."""
    return get_config().settings


def reset_config() -> None:
    """Drop the cached configuration so the next access reloads it."""
    global _config
    _config = None
