"""Tracked address source protocol."""

from typing import Protocol


class AddressRepository(Protocol):
    """Interface for the list of tracked addresses."""

    def list_addresses(self) -> list[str]:
        """Return tracked addresses in source order."""
        ...
