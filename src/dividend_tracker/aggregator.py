"""Dividend Aggregation.

Group dividend records into yearly, monthly, and per-security summaries.
"""

from collections import defaultdict
from datetime import date, datetime
import re
from typing import Any, Iterable

from src.dividend_tracker.config import MONTH_KEY_SEPARATOR
from src.dividend_tracker.errors import InvalidDividendDateError
from src.dividend_tracker.models import (
    DividendRecord,
    DividendSummary,
    MonthlyDividendSummary,
    SecurityDividendSummary,
    YearlyDividendSummary,
)

_REDUCED_DATE = re.compile(r"(\d{4})(?:-(\d{2}))?")


def parse_dividend_date(value: Any) -> date:
    """Parse an ISO-8601 date or datetime string to its calendar date.

    The calendar date is taken as written; offsets are not converted.
    Reduced-precision forms ("YYYY", "YYYY-MM") fall on the first day
    of the year or month.

    Raises:
        InvalidDividendDateError: if value is not ISO-8601.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDividendDateError(value)
    text = value.strip()
    try:
        match = _REDUCED_DATE.fullmatch(text)
        if match:
            return date(int(match.group(1)), int(match.group(2) or 1), 1)
        return datetime.fromisoformat(text).date()
    except ValueError as e:
        raise InvalidDividendDateError(value) from e


def month_key(year: int, month: int) -> str:
    """Format a "YYYY-MM" month key."""
    return f"{year:04d}{MONTH_KEY_SEPARATOR}{month:02d}"


def split_month_key(key: str) -> tuple[int, int]:
    """Split a "YYYY-MM" month key into (year, month)."""
    year_str, month_str = key.split(MONTH_KEY_SEPARATOR)
    return int(year_str), int(month_str)


def _running_total(values: Iterable[float]) -> float:
    # Plain left-to-right addition; sum() compensates on newer interpreters
    total = 0.0
    for value in values:
        total += value
    return total


class DividendAggregator:
    """Aggregates dividend records into summaries.

    Computes all three groupings in a single pass over the records:
    by calendar year, by calendar month, and by (account, security)
    with a per-month breakdown. Amounts of different currencies are
    summed as-is.

    Example:
        aggregator = DividendAggregator()
        summary = aggregator.aggregate(records)
        for year in summary.by_year:
            print(year.year, year.total)
    """

    def aggregate(self, records: Iterable[DividendRecord]) -> DividendSummary:
        """Aggregate records into a DividendSummary.

        Args:
            records: Canonical dividend records.

        Returns:
            DividendSummary; all collections empty when there are no records.

        Raises:
            InvalidDividendDateError: if a record date is not ISO-8601.
        """
        by_year: dict[int, dict[str, float]] = defaultdict(lambda: defaultdict(float))
        by_month: dict[str, dict[str, float]] = defaultdict(lambda: defaultdict(float))
        by_security: dict[tuple[str, str], dict[str, float]] = defaultdict(
            lambda: defaultdict(float)
        )
        account_names: dict[tuple[str, str], str] = {}

        for record in records:
            try:
                paid = parse_dividend_date(record.date)
            except InvalidDividendDateError as e:
                raise InvalidDividendDateError(
                    record.date, account_id=record.account_id, symbol=record.symbol
                ) from e

            key = month_key(paid.year, paid.month)
            pair = (record.account_id, record.symbol)

            by_year[paid.year][record.account_id] += record.amount
            by_month[key][record.account_id] += record.amount
            by_security[pair][key] += record.amount
            account_names.setdefault(pair, record.account_name)

        return DividendSummary(
            by_year=self._build_yearly(by_year),
            by_month=self._build_monthly(by_month),
            by_security_and_account=self._build_security(by_security, account_names),
        )

    def _build_yearly(
        self,
        by_year: dict[int, dict[str, float]],
    ) -> tuple[YearlyDividendSummary, ...]:
        summaries = [
            YearlyDividendSummary(
                year=year,
                total=_running_total(by_account.values()),
                by_account=by_account,
            )
            for year, by_account in by_year.items()
        ]
        return tuple(sorted(summaries, key=lambda s: s.year))

    def _build_monthly(
        self,
        by_month: dict[str, dict[str, float]],
    ) -> tuple[MonthlyDividendSummary, ...]:
        summaries = []
        for key, by_account in by_month.items():
            year, month = split_month_key(key)
            summaries.append(MonthlyDividendSummary(
                year=year,
                month=month,
                month_key=key,
                total=_running_total(by_account.values()),
                by_account=by_account,
            ))
        return tuple(sorted(summaries, key=lambda s: s.month_key))

    def _build_security(
        self,
        by_security: dict[tuple[str, str], dict[str, float]],
        account_names: dict[tuple[str, str], str],
    ) -> tuple[SecurityDividendSummary, ...]:
        return tuple(
            SecurityDividendSummary(
                symbol=symbol,
                account_id=account_id,
                account_name=account_names.get((account_id, symbol)) or account_id,
                by_month=by_month,
                total=_running_total(by_month.values()),
            )
            for (account_id, symbol), by_month in by_security.items()
        )


_DEFAULT_AGGREGATOR = DividendAggregator()


def aggregate(records: Iterable[DividendRecord]) -> DividendSummary:
    """Aggregate records with the default aggregator."""
    return _DEFAULT_AGGREGATOR.aggregate(records)
