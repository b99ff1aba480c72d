"""Explorer provider protocol."""

from typing import Protocol


class ExplorerProvider(Protocol):
    """
    Protocol for blockchain explorer API clients.

    Every method raises ExplorerError on a non-success response, network
    failure, timeout or malformed payload. Callers decide the fallback.
    """

    def get_transactions(self, address: str) -> list[dict]:
        """Return raw transaction records for an address, oldest first."""
        ...

    def get_block_number_before(self, timestamp: int) -> int:
        """Return the closest block mined at or before the epoch timestamp."""
        ...

    def get_balance_at_block(self, address: str, block: int) -> str:
        """Return the balance of an address at a block, in the smallest unit."""
        ...

    def get_balances(self, addresses: list[str]) -> list[dict]:
        """
        Return current balances for a batch of addresses.

        Each entry carries at least "account" and "balance".
        """
        ...
