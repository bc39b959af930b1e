"""
Sales History Repository Interface

This module defines the read-only contract used to pull aggregated sales
data out of the order ledger. Implementations decide how the ledger is
stored; the application layer only sees domain entities.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from src.domain.entities.sales import Observation, ProductSalesSummary, SalesOverview


class ISalesHistoryRepository(ABC):
    """Interface for sales history repository implementations."""

    @abstractmethod
    async def missing_collections(self) -> List[str]:
        """
        Check that the ledger is initialised.

        Returns:
            Names of the required collections that are missing
            (empty when everything is in place)
        """
        pass

    @abstractmethod
    async def fetch_daily_sales(
        self,
        since: datetime,
        product_ids: Optional[Sequence[int]] = None,
        statuses: Optional[Sequence[str]] = None,
    ) -> List[Observation]:
        """
        Aggregate order lines into one observation per product and day.

        Args:
            since: Only orders placed at or after this instant are counted
            product_ids: Restrict the result to these products (all if empty)
            statuses: Order statuses to include (implementation default if None)

        Returns:
            Observations ordered by product id, then date
        """
        pass

    @abstractmethod
    async def fetch_product_summaries(self) -> List[ProductSalesSummary]:
        """
        Lifetime totals per product, best-selling (by revenue) first.

        Returns:
            One summary per product, including products never sold
        """
        pass

    @abstractmethod
    async def fetch_sales_overview(self) -> SalesOverview:
        """
        Store-wide totals across every order line.

        Returns:
            The overview, all zeros when nothing was sold
        """
        pass
