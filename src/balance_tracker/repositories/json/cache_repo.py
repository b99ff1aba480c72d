"""JSON file implementation of BalanceCacheRepository."""

import json
import logging
from pathlib import Path
from typing import Optional

from balance_tracker.core.exceptions import CacheWriteError
from balance_tracker.domain.models import CacheStore, is_balance

logger = logging.getLogger(__name__)


class JsonFileBalanceCache:
    """
    File-backed daily balance cache.

    Layout: {address: {"YYYY-MM-DD": "<balance>"}}. Addresses keep the case they
    were first written with and are matched case-insensitively. The whole file
    is rewritten on save; concurrent writers lose updates.
    """

    def __init__(self, path: Path):
        self._path = Path(path)
        self._store: CacheStore = {}
        # lower-cased address -> key used in _store
        self._keys: dict[str, str] = {}

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> CacheStore:
        """Read the cache file; a missing or unparsable file yields an empty store."""
        self._store = self._read()
        self._keys = {address.lower(): address for address in self._store}
        return self._store

    def get(self, address: str, day: str) -> Optional[str]:
        key = self._keys.get(address.lower())
        if key is None:
            return None
        return self._store.get(key, {}).get(day)

    def set(self, address: str, day: str, balance: str) -> None:
        key = self._keys.setdefault(address.lower(), address)
        self._store.setdefault(key, {})[day] = balance

    def discard_from(self, day: str) -> int:
        dropped = 0
        for days in self._store.values():
            stale = [key for key in days if key >= day]
            for key in stale:
                del days[key]
            dropped += len(stale)
        return dropped

    def save(self, store: Optional[CacheStore] = None) -> None:
        payload = self._store if store is None else store
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            raise CacheWriteError(str(self._path), str(e)) from e
        logger.debug("Saved balance cache for %d addresses to %s", len(payload), self._path)

    def _read(self) -> CacheStore:
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable balance cache %s: %s", self._path, e)
            return {}

        if not isinstance(raw, dict):
            logger.warning("Ignoring balance cache %s: root is not an object", self._path)
            return {}

        store: CacheStore = {}
        for address, days in raw.items():
            if not isinstance(days, dict):
                continue
            store[address] = {
                day: balance
                for day, balance in days.items()
                if is_balance(balance)
            }
        return store
