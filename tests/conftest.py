from __future__ import annotations

import sys
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

import pytest

from src.domain.entities.sales import Observation, ProductSalesSummary, SalesOverview
from src.domain.repositories.sales_history_repository import ISalesHistoryRepository

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# 2024-01-01 is a Monday
SERIES_START = date(2024, 1, 1)


def make_series(
    product_id: int,
    values: Iterable[float],
    product_name: Optional[str] = None,
    start: date = SERIES_START,
) -> List[Observation]:
    """Consecutive daily observations starting at ``start``."""
    name = product_name or f"PRODUCT_{product_id}"
    return [
        Observation(
            date=start + timedelta(days=offset),
            product_id=product_id,
            product_name=name,
            daily_sales=value,
            quantity_sold=1,
        )
        for offset, value in enumerate(values)
    ]


class StubSalesHistoryRepository(ISalesHistoryRepository):
    def __init__(
        self,
        observations: Sequence[Observation] = (),
        missing: Sequence[str] = (),
        summaries: Sequence[ProductSalesSummary] = (),
        overview: Optional[SalesOverview] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.observations = list(observations)
        self.missing = list(missing)
        self.summaries = list(summaries)
        self.overview = overview or SalesOverview()
        self.error = error
        self.daily_sales_calls: List[Dict[str, Any]] = []

    async def missing_collections(self) -> List[str]:
        if self.error:
            raise self.error
        return list(self.missing)

    async def fetch_daily_sales(
        self,
        since: datetime,
        product_ids: Optional[Sequence[int]] = None,
        statuses: Optional[Sequence[str]] = None,
    ) -> List[Observation]:
        self.daily_sales_calls.append(
            {"since": since, "product_ids": product_ids, "statuses": statuses}
        )
        if self.error:
            raise self.error
        return list(self.observations)

    async def fetch_product_summaries(self) -> List[ProductSalesSummary]:
        if self.error:
            raise self.error
        return list(self.summaries)

    async def fetch_sales_overview(self) -> SalesOverview:
        if self.error:
            raise self.error
        return self.overview


class FakeMongoDatabase:
    """Stands in for MongoDatabase; returns canned aggregation results."""

    def __init__(
        self,
        results: Optional[Dict[str, List[Dict[str, Any]]]] = None,
        collections: Iterable[str] = ("products", "orders", "order_items"),
    ) -> None:
        self.results = results or {}
        self.collections = list(collections)
        self.pipelines: List[tuple[str, List[Dict[str, Any]]]] = []
        self.indexes_created = False
        self.closed = False

    async def list_collection_names(self) -> List[str]:
        return list(self.collections)

    async def aggregate(
        self, collection_name: str, pipeline: Sequence[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        self.pipelines.append((collection_name, list(pipeline)))
        return list(self.results.get(collection_name, []))

    async def create_indexes(self) -> None:
        self.indexes_created = True

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def increasing_series() -> List[Observation]:
    return make_series(1, [10, 20, 30, 40, 50], product_name="Wireless Mouse")
