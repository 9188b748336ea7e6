"""Configuration system using pydantic-settings with environment variable loading."""

from datetime import date

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MarketSettings(BaseSettings):
    """Synthetic market data generation settings."""

    model_config = SettingsConfigDict(env_prefix="MARKET_")

    history_days: int = Field(default=390, ge=0)  # calendar days back from reference date
    reference_date: date | None = None  # None = today


class AnalyticsSettings(BaseSettings):
    """Constants used by the metrics calculator and strategy simulator."""

    model_config = SettingsConfigDict(env_prefix="ANALYTICS_")

    trading_days: int = Field(default=252, gt=0)
    risk_free_rate: float = 0.02
    var_confidence: float = Field(default=0.95, gt=0, lt=1)
    min_candles: int = Field(default=30, ge=2)  # below this, strategies report insufficient data


class SnapshotSettings(BaseSettings):
    """Default query options for snapshot assembly."""

    model_config = SettingsConfigDict(env_prefix="SNAPSHOT_")

    default_lookback_days: int = Field(default=180, gt=0)
    default_capital: float = Field(default=25_000.0, gt=0)
    high_volatility_threshold: float = 0.35  # annualized
    default_risk_tolerance: int = Field(default=55, ge=0, le=100)


class DashboardSettings(BaseSettings):
    """Dashboard API server configuration."""

    model_config = SettingsConfigDict(env_prefix="DASHBOARD_")

    host: str = "0.0.0.0"
    port: int = 8080


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    log_format: str | None = None  # "json" or "console", read from LOG_FORMAT
    market: MarketSettings = MarketSettings()
    analytics: AnalyticsSettings = AnalyticsSettings()
    snapshot: SnapshotSettings = SnapshotSettings()
    dashboard: DashboardSettings = DashboardSettings()
