"""Dividend Tracker Configuration.

Enums, constants, and configuration for dividend extraction.
"""

from dataclasses import dataclass
from enum import Enum


# =============================================================================
# Enums
# =============================================================================

class ActivityType(str, Enum):
    """Activity kinds emitted by the host activity stream."""
    BUY = "BUY"
    SELL = "SELL"
    DIVIDEND = "DIVIDEND"
    INTEREST = "INTEREST"
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    FEE = "FEE"
    TAX = "TAX"
    SPLIT = "SPLIT"


# =============================================================================
# Constants
# =============================================================================

DIVIDEND_ACTIVITY_TYPE = ActivityType.DIVIDEND.value
UNKNOWN_SYMBOL = "UNKNOWN"
DEFAULT_CURRENCY = "USD"

# Month key format: "YYYY-MM"
MONTH_KEY_SEPARATOR = "-"

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December"
]


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class ExtractionConfig:
    """Normalization defaults applied when extracting dividend records."""
    dividend_activity_type: str = DIVIDEND_ACTIVITY_TYPE
    unknown_symbol: str = UNKNOWN_SYMBOL
    default_currency: str = DEFAULT_CURRENCY


DEFAULT_EXTRACTION_CONFIG = ExtractionConfig()
