"""
MongoDB Sales History Repository - Infrastructure Layer

This module implements ISalesHistoryRepository with aggregation pipelines
over the ``products``, ``orders`` and ``order_items`` collections.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence

from bson.decimal128 import Decimal128

from src.domain.entities.sales import Observation, ProductSalesSummary, SalesOverview
from src.domain.repositories.sales_history_repository import ISalesHistoryRepository
from src.infrastructure.database import MongoDatabase
from src.shared import (
    DEFAULT_ORDER_STATUSES,
    ORDER_ITEMS_COLLECTION,
    ORDERS_COLLECTION,
    PRODUCTS_COLLECTION,
    REQUIRED_COLLECTIONS,
)

_LINE_REVENUE = {"$multiply": ["$quantity", "$unit_price"]}


def _to_float(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, Decimal128):
        return float(value.to_decimal())
    return float(value)


class SalesHistoryRepository(ISalesHistoryRepository):
    """MongoDB implementation of the ISalesHistoryRepository."""

    def __init__(
        self,
        mongo_database: MongoDatabase,
        default_statuses: Sequence[str] = DEFAULT_ORDER_STATUSES,
    ):
        """
        Initialize the repository.

        Args:
            mongo_database: MongoDB database client
            default_statuses: Order statuses counted as sales when the caller
                does not pass any
        """
        self.db = mongo_database
        self.default_statuses = tuple(default_statuses)

    async def missing_collections(self) -> List[str]:
        existing = set(await self.db.list_collection_names())
        return [name for name in REQUIRED_COLLECTIONS if name not in existing]

    async def fetch_daily_sales(
        self,
        since: datetime,
        product_ids: Optional[Sequence[int]] = None,
        statuses: Optional[Sequence[str]] = None,
    ) -> List[Observation]:
        pipeline = self._daily_sales_pipeline(
            since, product_ids, statuses or self.default_statuses
        )
        documents = await self.db.aggregate(ORDER_ITEMS_COLLECTION, pipeline)
        return [self._to_observation(document) for document in documents]

    async def fetch_product_summaries(self) -> List[ProductSalesSummary]:
        pipeline: List[Dict[str, Any]] = [
            {
                "$lookup": {
                    "from": ORDER_ITEMS_COLLECTION,
                    "localField": "id",
                    "foreignField": "product_id",
                    "as": "items",
                }
            },
            {
                "$project": {
                    "_id": 0,
                    "id": 1,
                    "name": 1,
                    "price": 1,
                    "total_orders": {"$size": "$items"},
                    "total_quantity": {"$sum": "$items.quantity"},
                    "total_revenue": {
                        "$sum": {
                            "$map": {
                                "input": "$items",
                                "as": "item",
                                "in": {
                                    "$multiply": [
                                        "$$item.quantity",
                                        "$$item.unit_price",
                                    ]
                                },
                            }
                        }
                    },
                }
            },
            {"$sort": {"total_revenue": -1}},
        ]
        documents = await self.db.aggregate(PRODUCTS_COLLECTION, pipeline)
        return [
            ProductSalesSummary(
                id=int(document["id"]),
                name=str(document.get("name", "")),
                price=_to_float(document.get("price")),
                total_orders=int(document.get("total_orders") or 0),
                total_quantity=int(document.get("total_quantity") or 0),
                total_revenue=_to_float(document.get("total_revenue")),
            )
            for document in documents
        ]

    async def fetch_sales_overview(self) -> SalesOverview:
        pipeline: List[Dict[str, Any]] = [
            {
                "$lookup": {
                    "from": ORDERS_COLLECTION,
                    "localField": "order_id",
                    "foreignField": "id",
                    "as": "order",
                }
            },
            {"$unwind": "$order"},
            {
                "$group": {
                    "_id": None,
                    "order_ids": {"$addToSet": "$order_id"},
                    "product_ids": {"$addToSet": "$product_id"},
                    "customer_ids": {"$addToSet": "$order.user_id"},
                    "total_revenue": {"$sum": _LINE_REVENUE},
                    "avg_order_value": {"$avg": _LINE_REVENUE},
                }
            },
            {
                "$project": {
                    "_id": 0,
                    "total_orders": {"$size": "$order_ids"},
                    "total_products": {"$size": "$product_ids"},
                    "total_customers": {"$size": "$customer_ids"},
                    "total_revenue": 1,
                    "avg_order_value": 1,
                }
            },
        ]
        documents = await self.db.aggregate(ORDER_ITEMS_COLLECTION, pipeline)
        if not documents:
            return SalesOverview()

        document = documents[0]
        return SalesOverview(
            total_orders=int(document.get("total_orders") or 0),
            total_products=int(document.get("total_products") or 0),
            total_customers=int(document.get("total_customers") or 0),
            total_revenue=_to_float(document.get("total_revenue")),
            avg_order_value=_to_float(document.get("avg_order_value")),
        )

    def _daily_sales_pipeline(
        self,
        since: datetime,
        product_ids: Optional[Sequence[int]],
        statuses: Sequence[str],
    ) -> List[Dict[str, Any]]:
        pipeline: List[Dict[str, Any]] = []
        if product_ids:
            pipeline.append({"$match": {"product_id": {"$in": list(product_ids)}}})

        pipeline.extend(
            [
                {
                    "$lookup": {
                        "from": ORDERS_COLLECTION,
                        "localField": "order_id",
                        "foreignField": "id",
                        "as": "order",
                    }
                },
                {"$unwind": "$order"},
                {
                    "$match": {
                        "order.status": {"$in": list(statuses)},
                        "order.order_date": {"$gte": since},
                    }
                },
                {
                    "$lookup": {
                        "from": PRODUCTS_COLLECTION,
                        "localField": "product_id",
                        "foreignField": "id",
                        "as": "product",
                    }
                },
                {"$unwind": "$product"},
                {
                    "$group": {
                        "_id": {
                            "date": {
                                "$dateToString": {
                                    "format": "%Y-%m-%d",
                                    "date": "$order.order_date",
                                }
                            },
                            "product_id": "$product_id",
                            "product_name": "$product.name",
                        },
                        "daily_sales": {"$sum": "$total_price"},
                        "quantity_sold": {"$sum": "$quantity"},
                    }
                },
                {"$sort": {"_id.product_id": 1, "_id.date": 1}},
            ]
        )
        return pipeline

    def _to_observation(self, document: Dict[str, Any]) -> Observation:
        key = document["_id"]
        return Observation(
            date=date.fromisoformat(key["date"]),
            product_id=int(key["product_id"]),
            product_name=str(key.get("product_name", "")),
            daily_sales=_to_float(document.get("daily_sales")),
            quantity_sold=int(document.get("quantity_sold") or 0),
        )
