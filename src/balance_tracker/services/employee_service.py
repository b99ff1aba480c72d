"""Employee overview service: address list in, aggregated records out."""

import logging
from datetime import datetime
from typing import Optional

from balance_tracker.core.exceptions import AggregationError, AppError
from balance_tracker.domain.models import AggregationResult
from balance_tracker.repositories.protocols import AddressRepository
from balance_tracker.services.aggregation_service import BalanceAggregator

logger = logging.getLogger(__name__)


class EmployeeService:
    """
    Runs one aggregation over the tracked address list.

    Per-lookup failures are absorbed by the aggregator. Anything else fails the
    whole run with a single AggregationError; no partial output is returned.
    """

    def __init__(
        self,
        address_repo: AddressRepository,
        aggregator: BalanceAggregator,
    ):
        self._addresses = address_repo
        self._aggregator = aggregator

    def get_employees(self, now: Optional[datetime] = None) -> AggregationResult:
        try:
            addresses = self._addresses.list_addresses()
            return self._aggregator.aggregate(addresses, now=now)
        except AppError:
            raise
        except Exception as e:
            logger.exception("Aggregation run failed")
            raise AggregationError(str(e) or e.__class__.__name__) from e
