"""Dividend Summary DataFrames.

Tabular exports of a DividendSummary for reports and dashboards.
Account and month columns are zero-filled where a group has no amount.
"""

from typing import Optional

import pandas as pd

from src.dividend_tracker.aggregator import split_month_key
from src.dividend_tracker.models import DividendSummary


def _account_columns(breakdowns) -> list[str]:
    columns = set()
    for breakdown in breakdowns:
        columns.update(breakdown.by_account)
    return sorted(columns)


def yearly_frame(summary: DividendSummary) -> pd.DataFrame:
    """One row per year.

    Columns: year, total, <account_id_1>, <account_id_2>, ...
    """
    accounts = _account_columns(summary.by_year)
    columns = ["year", "total"] + accounts

    rows = [
        {"year": y.year, "total": y.total, **dict(y.by_account)}
        for y in summary.by_year
    ]
    df = pd.DataFrame(rows, columns=columns)
    if accounts:
        df[accounts] = df[accounts].fillna(0.0)
    return df


def monthly_frame(summary: DividendSummary, year: Optional[int] = None) -> pd.DataFrame:
    """One row per month with dividends, optionally limited to a year.

    Columns: month_key, year, month, total, <account_id_1>, ...
    """
    months = [m for m in summary.by_month if year is None or m.year == year]
    accounts = _account_columns(months)
    columns = ["month_key", "year", "month", "total"] + accounts

    rows = [
        {
            "month_key": m.month_key,
            "year": m.year,
            "month": m.month,
            "total": m.total,
            **dict(m.by_account),
        }
        for m in months
    ]
    df = pd.DataFrame(rows, columns=columns)
    if accounts:
        df[accounts] = df[accounts].fillna(0.0)
    return df


def security_frame(summary: DividendSummary, year: Optional[int] = None) -> pd.DataFrame:
    """One row per (account, security), months as columns.

    When year is given, only that year's months are kept and the total
    is recomputed; securities without a payment in the year are dropped.

    Columns: account_id, account_name, symbol, <YYYY-MM>..., total
    """
    rows = []
    month_columns = set()

    for item in summary.by_security_and_account:
        by_month = {
            k: v for k, v in item.by_month.items()
            if year is None or split_month_key(k)[0] == year
        }
        if not by_month:
            continue

        month_columns.update(by_month)
        total = 0.0
        for amount in by_month.values():
            total += amount
        rows.append({
            "account_id": item.account_id,
            "account_name": item.account_name,
            "symbol": item.symbol,
            **by_month,
            "total": total,
        })

    months = sorted(month_columns)
    df = pd.DataFrame(rows, columns=["account_id", "account_name", "symbol"] + months + ["total"])
    if months:
        df[months] = df[months].fillna(0.0)
    return df.sort_values(["account_id", "symbol"], ignore_index=True)
