"""Daily balance models."""

from dataclasses import dataclass
from datetime import date

# address -> {YYYY-MM-DD -> balance in smallest unit, as a decimal string}
CacheStore = dict[str, dict[str, str]]


@dataclass(frozen=True)
class DayEntry:
    """
    One planned calendar day of the reconstruction window.

    Recent days (today and yesterday) are always recomputed and never cached.
    """

    day: date
    key: str
    is_recent: bool = False


@dataclass(frozen=True)
class DailyBalance:
    """Closing balance of an address on a UTC calendar day."""

    date: str
    balance: str


def is_balance(value: object) -> bool:
    """True for a non-negative integer encoded as an ASCII decimal string."""
    return isinstance(value, str) and value.isascii() and value.isdigit()
