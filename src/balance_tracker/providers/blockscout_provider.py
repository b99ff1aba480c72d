"""Blockscout (Etherscan-compatible) explorer API client."""

import logging
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from balance_tracker.core.exceptions import ExplorerError
from balance_tracker.domain.models import is_balance

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://blockscout.shardeum.org/api"
RETRY_STATUSES = [429, 500, 502, 503, 504]


def build_session(retries: int = 3, backoff_seconds: float = 1.0) -> requests.Session:
    """Create a session that retries throttled and failed requests with backoff."""
    session = requests.Session()
    retry = Retry(
        total=retries,
        backoff_factor=backoff_seconds,
        status_forcelist=RETRY_STATUSES,
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update({"accept": "application/json"})
    return session


class BlockscoutExplorerProvider:
    """
    Explorer provider for the Blockscout `?module=...&action=...` API.

    Successful responses look like {"status": "1", "message": "OK", "result": ...}.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout_seconds: float = 10,
        session: Optional[requests.Session] = None,
    ):
        self._api_url = api_url
        self._timeout = timeout_seconds
        self._session = session or build_session()

    def get_transactions(self, address: str) -> list[dict]:
        result = self._query(module="account", action="txlist", address=address, sort="asc")
        if not isinstance(result, list):
            raise ExplorerError(f"txlist for {address}: result is not a list")
        return [tx for tx in result if isinstance(tx, dict)]

    def get_block_number_before(self, timestamp: int) -> int:
        result = self._query(
            module="block",
            action="getblocknobytime",
            timestamp=str(timestamp),
            closest="before",
        )
        # Etherscan returns the number itself, Blockscout wraps it in an object
        if isinstance(result, dict):
            result = result.get("blockNumber")
        try:
            block = int(result)
        except (TypeError, ValueError):
            raise ExplorerError(f"getblocknobytime {timestamp}: malformed block number {result!r}")
        if block < 0:
            raise ExplorerError(f"getblocknobytime {timestamp}: negative block number {block}")
        return block

    def get_balance_at_block(self, address: str, block: int) -> str:
        result = self._query(module="account", action="balance", address=address, block=str(block))
        if not is_balance(result):
            raise ExplorerError(f"balance for {address} at {block}: malformed balance {result!r}")
        return result

    def get_balances(self, addresses: list[str]) -> list[dict]:
        if not addresses:
            return []
        result = self._query(module="account", action="balancemulti", address=",".join(addresses))
        if not isinstance(result, list):
            raise ExplorerError(f"balancemulti for {len(addresses)} addresses: result is not a list")
        return [entry for entry in result if isinstance(entry, dict)]

    def close(self) -> None:
        self._session.close()

    def _query(self, **params: str) -> Any:
        """GET the API with the given query params and return the "result" field."""
        label = f"{params.get('module')}/{params.get('action')}"
        try:
            response = self._session.get(self._api_url, params=params, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise ExplorerError(f"{label} request failed: {e}") from e
        except ValueError as e:
            raise ExplorerError(f"{label} returned invalid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise ExplorerError(f"{label} returned a non-object payload")
        if payload.get("status") != "1" or payload.get("result") is None:
            raise ExplorerError(f"{label} failed: {payload.get('message') or 'no result'}")
        logger.debug("%s ok", label)
        return payload["result"]
