"""Centralized settings for the dividend tracker.

Uses pydantic-settings to load from environment variables (prefixed
DIVIDEND_TRACKER_) with defaults matching the module constants.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic_settings import BaseSettings

from src.logging_config.config import LogFormat, LoggingConfig, LogLevel

if TYPE_CHECKING:
    from src.dividend_tracker.config import ExtractionConfig


class Settings(BaseSettings):
    """Dividend tracker settings loaded from environment variables."""

    # --- Extraction (defaults match src.dividend_tracker.config) ---
    dividend_activity_type: str = "DIVIDEND"
    unknown_symbol: str = "UNKNOWN"
    default_currency: str = "USD"

    # --- Logging ---
    log_level: LogLevel = LogLevel.INFO
    log_format: LogFormat = LogFormat.JSON
    slow_threshold_ms: float = 1000.0

    model_config = {
        "env_prefix": "DIVIDEND_TRACKER_",
        "env_file": ".env",
        "extra": "ignore",
    }

    def extraction_config(self) -> "ExtractionConfig":
        """Build an ExtractionConfig from these settings."""
        from src.dividend_tracker.config import ExtractionConfig

        return ExtractionConfig(
            dividend_activity_type=self.dividend_activity_type,
            unknown_symbol=self.unknown_symbol,
            default_currency=self.default_currency,
        )

    def logging_config(self) -> LoggingConfig:
        return LoggingConfig(
            level=self.log_level,
            format=self.log_format,
            slow_threshold_ms=self.slow_threshold_ms,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton."""
    return Settings()
