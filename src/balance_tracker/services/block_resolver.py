"""Calendar day to end-of-day block resolution."""

import logging
from datetime import date
from typing import Optional

from balance_tracker.core.exceptions import ExplorerError
from balance_tracker.core.timezone import end_of_day_timestamp
from balance_tracker.providers.explorer_provider import ExplorerProvider

logger = logging.getLogger(__name__)


class BlockResolver:
    """Maps a UTC calendar day to the last block at or before its end."""

    def __init__(self, provider: ExplorerProvider):
        self._provider = provider

    def resolve_end_of_day_block(self, day: date) -> Optional[int]:
        """Return the closest block before 23:59:59.999 UTC of day, or None if unresolved."""
        timestamp = end_of_day_timestamp(day)
        try:
            return self._provider.get_block_number_before(timestamp)
        except ExplorerError as e:
            logger.warning("Unresolved end-of-day block for %s: %s", day.isoformat(), e.message)
            return None
