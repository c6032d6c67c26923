"""Dividend Tracker Data Models.

Dataclasses for host inputs (activities, accounts), the canonical
dividend record, and the yearly / monthly / per-security summaries.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional


def _frozen(values: Optional[Mapping[str, float]] = None) -> Mapping[str, float]:
    """Copy into a read-only mapping."""
    return MappingProxyType(dict(values or {}))


def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the value of the first key present in data."""
    for key in keys:
        if key in data:
            return data[key]
    return None


# =============================================================================
# Host Input Models
# =============================================================================

@dataclass
class RawActivity:
    """An activity from the host's activity stream.

    Only DIVIDEND activities are of interest; every field other than the
    type tag may be missing on malformed rows.
    """
    activity_type: str = ""
    account_id: Optional[str] = None
    date: Any = None  # ISO string, or a date/datetime from Python hosts
    amount: Any = None
    currency: Optional[str] = None

    # The host carries the ticker under either field
    asset_symbol: Optional[str] = None
    symbol: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RawActivity":
        """Build from a host payload with camelCase or snake_case keys."""
        return cls(
            activity_type=_pick(data, "activityType", "activity_type", "type") or "",
            account_id=_pick(data, "accountId", "account_id"),
            date=_pick(data, "date", "activityDate", "activity_date"),
            amount=_pick(data, "amount"),
            currency=_pick(data, "currency"),
            asset_symbol=_pick(data, "assetSymbol", "asset_symbol"),
            symbol=_pick(data, "symbol"),
        )


@dataclass
class Account:
    """A host account; only the id and display name are used."""
    id: str
    name: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Account":
        return cls(
            id=_pick(data, "id", "accountId", "account_id"),
            name=_pick(data, "name", "accountName", "account_name") or "",
        )


# =============================================================================
# Canonical Record
# =============================================================================

@dataclass(frozen=True)
class DividendRecord:
    """A single dividend payment normalized from a raw activity."""
    account_id: str
    account_name: str
    symbol: str
    date: str  # ISO-8601
    amount: float = 0.0
    currency: str = "USD"

    def to_dict(self) -> dict[str, Any]:
        return {
            "accountId": self.account_id,
            "accountName": self.account_name,
            "symbol": self.symbol,
            "date": self.date,
            "amount": self.amount,
            "currency": self.currency,
        }


# =============================================================================
# Summary Models
# =============================================================================

@dataclass(frozen=True)
class YearlyDividendSummary:
    """Dividends received in a calendar year, per account."""
    year: int
    total: float = 0.0
    by_account: Mapping[str, float] = field(default_factory=_frozen)

    def __post_init__(self):
        object.__setattr__(self, "by_account", _frozen(self.by_account))

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "total": self.total,
            "byAccount": dict(self.by_account),
        }


@dataclass(frozen=True)
class MonthlyDividendSummary:
    """Dividends received in a calendar month, per account."""
    year: int
    month: int  # 1-12
    month_key: str  # "YYYY-MM"
    total: float = 0.0
    by_account: Mapping[str, float] = field(default_factory=_frozen)

    def __post_init__(self):
        object.__setattr__(self, "by_account", _frozen(self.by_account))

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "monthKey": self.month_key,
            "total": self.total,
            "byAccount": dict(self.by_account),
        }


@dataclass(frozen=True)
class SecurityDividendSummary:
    """Dividends from one security held in one account, per month."""
    symbol: str
    account_id: str
    account_name: str
    by_month: Mapping[str, float] = field(default_factory=_frozen)
    total: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "by_month", _frozen(self.by_month))

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol,
            "accountId": self.account_id,
            "accountName": self.account_name,
            "byMonth": dict(self.by_month),
            "total": self.total,
        }


@dataclass(frozen=True)
class DividendSummary:
    """The three dividend summaries produced by one aggregation."""
    by_year: tuple[YearlyDividendSummary, ...] = ()
    by_month: tuple[MonthlyDividendSummary, ...] = ()
    by_security_and_account: tuple[SecurityDividendSummary, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "by_year", tuple(self.by_year))
        object.__setattr__(self, "by_month", tuple(self.by_month))
        object.__setattr__(
            self, "by_security_and_account", tuple(self.by_security_and_account)
        )

    @property
    def is_empty(self) -> bool:
        return not self.by_year

    @property
    def grand_total(self) -> float:
        """Sum of all yearly totals (amounts of every currency combined)."""
        return sum(y.total for y in self.by_year)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the host contract shape."""
        return {
            "byYear": [y.to_dict() for y in self.by_year],
            "byMonth": [m.to_dict() for m in self.by_month],
            "bySecurityAndAccount": [s.to_dict() for s in self.by_security_and_account],
        }
