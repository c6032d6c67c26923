"""Structured Logging.

Provides structured JSON logging, run context binding,
and performance timing for the dividend tracker.
"""

from src.logging_config.config import LogFormat, LoggingConfig, LogLevel
from src.logging_config.context import LogContext, generate_run_id, get_context_dict
from src.logging_config.performance import PerformanceTimer, log_performance
from src.logging_config.setup import configure_logging

__all__ = [
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "LogContext",
    "PerformanceTimer",
    "configure_logging",
    "generate_run_id",
    "get_context_dict",
    "log_performance",
]
