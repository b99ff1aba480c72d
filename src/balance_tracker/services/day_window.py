"""Day window planning for daily balance reconstruction."""

from datetime import date, timedelta

from balance_tracker.core.exceptions import ValidationError
from balance_tracker.core.timezone import day_key
from balance_tracker.domain.models import DayEntry

DEFAULT_WINDOW_DAYS = 32
DEFAULT_RECENT_DAYS = 2
# Today and yesterday can still change
MIN_RECENT_DAYS = 2


class DayWindowPlanner:
    """
    Plans the consecutive UTC calendar days ending today.

    The newest `recent_days` entries are flagged recent: their closing balance
    can still change, so they bypass the cache.
    """

    def __init__(self, recent_days: int = DEFAULT_RECENT_DAYS):
        if recent_days < MIN_RECENT_DAYS:
            raise ValidationError(
                f"recent_days must be >= {MIN_RECENT_DAYS}, got {recent_days}"
            )
        self._recent_days = recent_days

    def window(self, today: date, n: int = DEFAULT_WINDOW_DAYS) -> list[DayEntry]:
        """Return n days from today-(n-1) through today, oldest first."""
        if n < 1:
            raise ValidationError(f"Window must contain at least one day, got {n}")
        return [
            DayEntry(
                day=today - timedelta(days=offset),
                key=day_key(today - timedelta(days=offset)),
                is_recent=offset < self._recent_days,
            )
            for offset in range(n - 1, -1, -1)
        ]
