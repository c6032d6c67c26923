"""Dividend Tracker Service.

Runs extraction and aggregation for a host, with logging, timing,
and an optional instrumentation hook.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Protocol, runtime_checkable
import logging

from src.dividend_tracker.aggregator import DividendAggregator
from src.dividend_tracker.errors import DividendDataUnavailableError
from src.dividend_tracker.extractor import (
    AccountInput,
    ActivityInput,
    DividendExtractor,
    as_account,
    as_activity,
)
from src.dividend_tracker.models import DividendSummary
from src.logging_config.context import LogContext
from src.logging_config.performance import PerformanceTimer, log_performance
from src.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionStats:
    """Counts observed during one summary run."""
    total_activities: int = 0
    activity_types: tuple[str, ...] = ()
    dividend_activities: int = 0
    extracted_records: int = 0

    @property
    def dropped_records(self) -> int:
        """Dividend activities dropped for a missing date or account."""
        return self.dividend_activities - self.extracted_records


SummaryHook = Callable[[ExtractionStats], Any]


@runtime_checkable
class ActivityDataSource(Protocol):
    """Host data access for accounts and activities."""

    def get_accounts(self) -> Iterable[AccountInput]:
        ...

    def get_activities(self) -> Iterable[ActivityInput]:
        ...


class DividendTracker:
    """Builds dividend summaries from host activity data.

    Example:
        tracker = DividendTracker(hook=lambda stats: print(stats))
        summary = tracker.summarize(activities, accounts)
        print(summary.to_dict()["byYear"])
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        hook: Optional[SummaryHook] = None,
    ):
        self.settings = settings or get_settings()
        self.hook = hook
        self.extractor = DividendExtractor(self.settings.extraction_config())
        self.aggregator = DividendAggregator()

    def summarize(
        self,
        activities: Iterable[ActivityInput],
        accounts: Iterable[AccountInput],
    ) -> DividendSummary:
        """Extract and aggregate dividends.

        Args:
            activities: Raw activities (models or host dicts).
            accounts: Accounts for display-name resolution.

        Returns:
            DividendSummary for all qualifying dividend activities.

        Raises:
            InvalidDividendDateError: if an extracted date is not ISO-8601.
        """
        activities = [as_activity(a) for a in activities]
        accounts = [as_account(a) for a in accounts]

        with LogContext() as ctx, PerformanceTimer(
            "dividend_summary", threshold_ms=self.settings.slow_threshold_ms, log=logger
        ):
            records = self.extractor.extract(activities, accounts)
            stats = ExtractionStats(
                total_activities=len(activities),
                activity_types=tuple(sorted({a.activity_type for a in activities})),
                dividend_activities=sum(1 for a in activities if self.extractor.is_dividend(a)),
                extracted_records=len(records),
            )
            ctx.bind(
                activities=stats.total_activities,
                dividend_activities=stats.dividend_activities,
                records=stats.extracted_records,
            )
            logger.debug(f"Activity types: {', '.join(stats.activity_types) or 'none'}")
            if stats.dropped_records:
                logger.info(f"Skipped {stats.dropped_records} incomplete dividend activities")

            summary = self.aggregator.aggregate(records)
            logger.info(
                f"Summarized {stats.extracted_records} dividends into "
                f"{len(summary.by_year)} years, {len(summary.by_month)} months, "
                f"{len(summary.by_security_and_account)} securities"
            )

        if self.hook is not None:
            self.hook(stats)

        return summary

    @log_performance()
    def load_summary(self, source: ActivityDataSource) -> DividendSummary:
        """Fetch accounts and activities from a source and summarize them.

        No summary is computed when the source has no accounts; an empty
        summary is returned instead.

        Raises:
            DividendDataUnavailableError: if the source fails.
        """
        accounts = self._load(source.get_accounts, "accounts")
        if not accounts:
            logger.info("No accounts available, skipping dividend summary")
            return DividendSummary()

        activities = self._load(source.get_activities, "activities")
        return self.summarize(activities, accounts)

    def _load(self, fetch: Callable[[], Iterable[Any]], name: str) -> list[Any]:
        try:
            return list(fetch())
        except Exception as e:
            logger.error(f"Failed to load {name}: {e}")
            raise DividendDataUnavailableError(f"Could not load {name}: {e}", source=name) from e
