"""Dividend Extraction.

Select dividend activities from the host activity stream and normalize
them into canonical DividendRecords.
"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping, Optional, Union
import logging
import math

from src.dividend_tracker.config import DEFAULT_EXTRACTION_CONFIG, ExtractionConfig
from src.dividend_tracker.models import Account, DividendRecord, RawActivity

logger = logging.getLogger(__name__)


ActivityInput = Union[RawActivity, Mapping[str, Any]]
AccountInput = Union[Account, Mapping[str, Any]]


def as_activity(activity: ActivityInput) -> RawActivity:
    if isinstance(activity, RawActivity):
        return activity
    return RawActivity.from_dict(activity)


def as_account(account: AccountInput) -> Account:
    if isinstance(account, Account):
        return account
    return Account.from_dict(account)


def normalize_amount(value: Any) -> float:
    """Coerce an amount to float; missing or non-numeric values become 0."""
    if value is None or value == "" or isinstance(value, bool):
        return 0.0
    try:
        amount = float(Decimal(value.strip()) if isinstance(value, str) else value)
    except (TypeError, ValueError, InvalidOperation):
        return 0.0
    if math.isnan(amount):
        return 0.0
    return amount


def normalize_date(value: Any) -> Optional[str]:
    """Return the date as an ISO string, or None when missing.

    Only None counts as missing; an empty string is kept and fails
    date parsing during aggregation.
    """
    if value is None:
        return None
    if isinstance(value, date):
        return value.isoformat()
    return value


class DividendExtractor:
    """Extracts dividend records from an activity stream.

    Non-dividend activities are ignored. Dividend activities without a
    date or account id are dropped silently; every other dividend
    activity yields exactly one record, in input order.

    Example:
        extractor = DividendExtractor()
        records = extractor.extract(activities, accounts)
    """

    def __init__(self, config: Optional[ExtractionConfig] = None):
        self.config = config or DEFAULT_EXTRACTION_CONFIG

    def extract(
        self,
        activities: Iterable[ActivityInput],
        accounts: Iterable[AccountInput],
    ) -> list[DividendRecord]:
        """Extract dividend records.

        Args:
            activities: Raw activities (models or host dicts).
            accounts: Accounts used to resolve display names.

        Returns:
            One DividendRecord per qualifying dividend activity.
        """
        account_names = self.build_account_names(accounts)

        records = []
        dropped = 0
        for raw in activities:
            activity = as_activity(raw)
            if not self.is_dividend(activity):
                continue

            record = self._to_record(activity, account_names)
            if record is None:
                dropped += 1
                continue
            records.append(record)

        if dropped:
            logger.debug(f"Dropped {dropped} dividend activities without date or account")

        return records

    def build_account_names(self, accounts: Iterable[AccountInput]) -> dict[str, str]:
        """Map account id -> display name (last duplicate wins)."""
        names = {}
        for raw in accounts:
            account = as_account(raw)
            names[account.id] = account.name
        return names

    def is_dividend(self, activity: RawActivity) -> bool:
        return activity.activity_type == self.config.dividend_activity_type

    def resolve_symbol(self, activity: RawActivity) -> str:
        return activity.asset_symbol or activity.symbol or self.config.unknown_symbol

    def _to_record(
        self,
        activity: RawActivity,
        account_names: dict[str, str],
    ) -> Optional[DividendRecord]:
        record_date = normalize_date(activity.date)
        account_id = activity.account_id
        if record_date is None or not account_id:
            return None

        return DividendRecord(
            account_id=account_id,
            account_name=account_names.get(account_id) or account_id,
            symbol=self.resolve_symbol(activity),
            date=record_date,
            amount=normalize_amount(activity.amount),
            currency=activity.currency or self.config.default_currency,
        )


_DEFAULT_EXTRACTOR = DividendExtractor()


def extract(
    activities: Iterable[ActivityInput],
    accounts: Iterable[AccountInput],
) -> list[DividendRecord]:
    """Extract dividend records with the default configuration."""
    return _DEFAULT_EXTRACTOR.extract(activities, accounts)
