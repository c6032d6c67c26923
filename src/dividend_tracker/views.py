"""Dividend Report Views.

Prepare summary data for yearly, monthly, and per-security report
tables: year selection, account ranking, 12-month breakdowns, and
per-account security grids. No formatting is applied to amounts.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Mapping, Optional, Protocol

from src.dividend_tracker.aggregator import month_key, split_month_key
from src.dividend_tracker.config import MONTH_NAMES
from src.dividend_tracker.extractor import AccountInput, as_account
from src.dividend_tracker.models import Account, DividendSummary, SecurityDividendSummary


class AccountBreakdown(Protocol):
    """Any summary carrying per-account amounts."""
    by_account: Mapping[str, float]


# =============================================================================
# View Models
# =============================================================================

@dataclass(frozen=True)
class AccountTotal:
    """An account and its dividend total over a set of summaries."""
    account_id: str
    account_name: str
    total: float = 0.0


@dataclass(frozen=True)
class MonthBreakdownRow:
    """One month of a yearly monthly-breakdown table."""
    month: int
    month_name: str
    month_key: str
    by_account: dict[str, float] = field(default_factory=dict)
    total: float = 0.0


@dataclass(frozen=True)
class SecurityBreakdown:
    """Security summaries for one year, grouped by account."""
    year: int
    month_columns: list[str] = field(default_factory=list)
    by_account: dict[str, list[SecurityDividendSummary]] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.by_account


# =============================================================================
# Year Selection
# =============================================================================

def available_years(summary: DividendSummary) -> list[int]:
    """Years with monthly dividend data, most recent first."""
    return sorted({m.year for m in summary.by_month}, reverse=True)


def latest_year(summary: DividendSummary, today: Optional[date] = None) -> int:
    """Most recent year with dividends, or the current year if none."""
    if not summary.by_year:
        return (today or date.today()).year
    return max(y.year for y in summary.by_year)


# =============================================================================
# Account Ranking
# =============================================================================

def rank_accounts(
    accounts: Iterable[AccountInput],
    breakdowns: Iterable[AccountBreakdown],
) -> list[AccountTotal]:
    """Accounts that received dividends, largest total first.

    Args:
        accounts: Host accounts, in display order.
        breakdowns: Yearly or monthly summaries to total per account.

    Returns:
        AccountTotal for each account whose total is positive.
    """
    breakdowns = list(breakdowns)
    ranked = []
    for raw in accounts:
        account = as_account(raw)
        total = 0.0
        for breakdown in breakdowns:
            total += breakdown.by_account.get(account.id, 0.0)
        if total > 0:
            ranked.append(AccountTotal(
                account_id=account.id,
                account_name=account.name or account.id,
                total=total,
            ))

    # Stable: ties keep account order
    return sorted(ranked, key=lambda a: a.total, reverse=True)


# =============================================================================
# Monthly Breakdown
# =============================================================================

def monthly_breakdown(
    summary: DividendSummary,
    year: int,
    account_ids: Optional[list[str]] = None,
) -> list[MonthBreakdownRow]:
    """Twelve rows (January-December) of dividends for a year.

    Args:
        summary: Aggregated dividend summary.
        year: Calendar year to break down.
        account_ids: Accounts to include as columns. Defaults to the
            accounts ranked by their total for the year.

    Returns:
        List of 12 MonthBreakdownRow, zero-filled for months without data.
    """
    months = {m.month: m for m in summary.by_month if m.year == year}

    if account_ids is None:
        seen = {}
        for m in sorted(months.values(), key=lambda m: m.month):
            seen.update(dict.fromkeys(m.by_account))
        ranked = rank_accounts([Account(id=i) for i in seen], months.values())
        account_ids = [a.account_id for a in ranked]

    rows = []
    for month in range(1, 13):
        data = months.get(month)
        amounts = {
            account_id: (data.by_account.get(account_id, 0.0) if data else 0.0)
            for account_id in account_ids
        }
        total = 0.0
        for amount in amounts.values():
            total += amount
        rows.append(MonthBreakdownRow(
            month=month,
            month_name=MONTH_NAMES[month - 1],
            month_key=month_key(year, month),
            by_account=amounts,
            total=total,
        ))

    return rows


# =============================================================================
# Security Breakdown
# =============================================================================

def security_breakdown(summary: DividendSummary, year: int) -> SecurityBreakdown:
    """Per-security dividends for a year, grouped by account.

    Each security's by_month is restricted to the year's months and its
    total recomputed; securities with no payment in the year are left
    out. Each account's securities are sorted by symbol.
    """
    by_account: dict[str, list[SecurityDividendSummary]] = {}
    columns = set()

    for item in summary.by_security_and_account:
        keys = [k for k in item.by_month if split_month_key(k)[0] == year]
        if not keys:
            continue

        columns.update(keys)
        by_month = {k: item.by_month[k] for k in keys}
        total = 0.0
        for k in keys:
            total += item.by_month[k]

        filtered = SecurityDividendSummary(
            symbol=item.symbol,
            account_id=item.account_id,
            account_name=item.account_name,
            by_month=by_month,
            total=total,
        )
        by_account.setdefault(item.account_id, []).append(filtered)

    for items in by_account.values():
        items.sort(key=lambda s: s.symbol)

    return SecurityBreakdown(
        year=year,
        month_columns=sorted(columns),
        by_account=by_account,
    )
