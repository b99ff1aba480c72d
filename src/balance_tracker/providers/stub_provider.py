"""Stub explorer provider for offline/testing use."""

import hashlib

from balance_tracker.core.exceptions import ExplorerError

WEI_PER_SHM = 10**18

# Chain start used to derive fake block numbers from timestamps
_GENESIS_TIMESTAMP = 1_700_000_000
_SECONDS_PER_BLOCK = 6


def _seed(address: str) -> int:
    """Deterministic per-address integer derived from the lower-cased address."""
    digest = hashlib.sha256(address.lower().encode("utf-8")).hexdigest()
    return int(digest[:8], 16)


class StubExplorerProvider:
    """
    Stub provider with deterministic fake data for offline operation.

    Balances grow by a fixed per-address step every block-day; each address
    gets two synthetic transfers.
    """

    def get_transactions(self, address: str) -> list[dict]:
        seed = _seed(address)
        counterparty = "0x" + f"{seed:040x}"[-40:]
        base_ts = _GENESIS_TIMESTAMP + seed % 86_400
        return [
            {
                "hash": f"0x{seed:064x}",
                "from": counterparty,
                "to": address,
                "value": str(545 * WEI_PER_SHM),
                "timeStamp": str(base_ts),
            },
            {
                "hash": f"0x{seed + 1:064x}",
                "from": address,
                "to": counterparty,
                "value": str(WEI_PER_SHM),
                "timeStamp": str(base_ts + 3_600),
            },
        ]

    def get_block_number_before(self, timestamp: int) -> int:
        if timestamp < _GENESIS_TIMESTAMP:
            raise ExplorerError(f"No block before {timestamp}")
        return (timestamp - _GENESIS_TIMESTAMP) // _SECONDS_PER_BLOCK

    def get_balance_at_block(self, address: str, block: int) -> str:
        step = _seed(address) % 1_000 + 1
        return str(step * (block // 14_400 + 1) * WEI_PER_SHM // 100)

    def get_balances(self, addresses: list[str]) -> list[dict]:
        return [
            {
                "account": address,
                "balance": str((_seed(address) % 10_000) * WEI_PER_SHM),
                "stale": False,
            }
            for address in addresses
        ]
