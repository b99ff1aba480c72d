"""JSON file repository implementations."""

from balance_tracker.repositories.json.cache_repo import JsonFileBalanceCache

__all__ = [
    "JsonFileBalanceCache",
]
