"""Transfer history retrieval and classification."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from balance_tracker.core.exceptions import ExplorerError
from balance_tracker.domain.models import TransferDirection, TransferEvent
from balance_tracker.providers.explorer_provider import ExplorerProvider

logger = logging.getLogger(__name__)


def _parse_int(value: object) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        # str.isdigit also accepts non-ASCII digits such as "²"
        if text.isascii() and text.isdigit():
            return int(text)
    return None


def _lower(value: object) -> str:
    return value.lower() if isinstance(value, str) else ""


def classify_transfer(raw: dict, address: str) -> Optional[TransferEvent]:
    """
    Classify a raw explorer transaction relative to address.

    Incoming when the recipient is address, outgoing when the sender is.
    Returns None for records involving neither side, or with an unusable
    value or timestamp.
    """
    magnitude = _parse_int(raw.get("value"))
    timestamp = _parse_int(raw.get("timeStamp"))
    # Zero-value records carry no signed amount
    if not magnitude or timestamp is None:
        return None

    me = address.lower()
    tx_hash = raw.get("hash") or ""
    if _lower(raw.get("to")) == me:
        return TransferEvent(value=magnitude, direction=TransferDirection.IN, hash=tx_hash, timestamp=timestamp)
    if _lower(raw.get("from")) == me:
        return TransferEvent(value=-magnitude, direction=TransferDirection.OUT, hash=tx_hash, timestamp=timestamp)
    return None


class TransactionFetcher:
    """Fetches and normalizes native transfer history for tracked addresses."""

    def __init__(self, provider: ExplorerProvider, max_workers: int = 4):
        self._provider = provider
        self._max_workers = max(1, max_workers)

    def fetch(self, address: str) -> list[TransferEvent]:
        """Return the address's transfers sorted by timestamp; [] on any lookup failure."""
        try:
            records = self._provider.get_transactions(address)
        except ExplorerError as e:
            logger.warning("No transfer history for %s: %s", address, e.message)
            return []

        events = []
        for raw in records:
            event = classify_transfer(raw, address)
            if event is not None:
                events.append(event)
        return sorted(events, key=lambda event: event.timestamp)

    def fetch_many(self, addresses: list[str]) -> dict[str, list[TransferEvent]]:
        """Fetch histories concurrently; keyed by lower-cased address."""
        if not addresses:
            return {}
        with ThreadPoolExecutor(max_workers=min(self._max_workers, len(addresses))) as ex:
            histories = ex.map(self.fetch, addresses)
            return {address.lower(): events for address, events in zip(addresses, histories)}
