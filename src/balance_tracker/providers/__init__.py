"""Explorer API providers module."""

from balance_tracker.providers.explorer_provider import ExplorerProvider
from balance_tracker.providers.blockscout_provider import BlockscoutExplorerProvider
from balance_tracker.providers.stub_provider import StubExplorerProvider

__all__ = [
    "ExplorerProvider",
    "BlockscoutExplorerProvider",
    "StubExplorerProvider",
]
