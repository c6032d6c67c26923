"""Dividend Tracker.

Extract dividend activities from an account activity stream and
summarize them by year, by month, and by security per account.

Example:
    from src.dividend_tracker import extract, aggregate

    records = extract(activities, accounts)
    summary = aggregate(records)
    for year in summary.by_year:
        print(year.year, year.total, dict(year.by_account))
"""

from src.dividend_tracker.config import (
    ActivityType,
    DIVIDEND_ACTIVITY_TYPE,
    UNKNOWN_SYMBOL,
    DEFAULT_CURRENCY,
    MONTH_NAMES,
    ExtractionConfig,
    DEFAULT_EXTRACTION_CONFIG,
)

from src.dividend_tracker.errors import (
    DividendTrackerError,
    InvalidDividendDateError,
    DividendDataUnavailableError,
)

from src.dividend_tracker.models import (
    RawActivity,
    Account,
    DividendRecord,
    YearlyDividendSummary,
    MonthlyDividendSummary,
    SecurityDividendSummary,
    DividendSummary,
)

from src.dividend_tracker.extractor import (
    DividendExtractor,
    extract,
    normalize_amount,
)

from src.dividend_tracker.aggregator import (
    DividendAggregator,
    aggregate,
    month_key,
    parse_dividend_date,
)

from src.dividend_tracker.views import (
    AccountTotal,
    MonthBreakdownRow,
    SecurityBreakdown,
    available_years,
    latest_year,
    rank_accounts,
    monthly_breakdown,
    security_breakdown,
)

from src.dividend_tracker.frames import (
    yearly_frame,
    monthly_frame,
    security_frame,
)

from src.dividend_tracker.tracker import (
    ActivityDataSource,
    DividendTracker,
    ExtractionStats,
)


__all__ = [
    # Config
    "ActivityType",
    "DIVIDEND_ACTIVITY_TYPE",
    "UNKNOWN_SYMBOL",
    "DEFAULT_CURRENCY",
    "MONTH_NAMES",
    "ExtractionConfig",
    "DEFAULT_EXTRACTION_CONFIG",
    # Errors
    "DividendTrackerError",
    "InvalidDividendDateError",
    "DividendDataUnavailableError",
    # Models
    "RawActivity",
    "Account",
    "DividendRecord",
    "YearlyDividendSummary",
    "MonthlyDividendSummary",
    "SecurityDividendSummary",
    "DividendSummary",
    # Extraction
    "DividendExtractor",
    "extract",
    "normalize_amount",
    # Aggregation
    "DividendAggregator",
    "aggregate",
    "month_key",
    "parse_dividend_date",
    # Views
    "AccountTotal",
    "MonthBreakdownRow",
    "SecurityBreakdown",
    "available_years",
    "latest_year",
    "rank_accounts",
    "monthly_breakdown",
    "security_breakdown",
    # Frames
    "yearly_frame",
    "monthly_frame",
    "security_frame",
    # Service
    "ActivityDataSource",
    "DividendTracker",
    "ExtractionStats",
]
