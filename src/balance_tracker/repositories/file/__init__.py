"""Plain-file repository implementations."""

from balance_tracker.repositories.file.address_repo import FileAddressRepository

__all__ = [
    "FileAddressRepository",
]
