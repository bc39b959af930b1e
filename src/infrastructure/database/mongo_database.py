"""
MongoDB Database - Infrastructure Layer

This module provides a thin MongoDB client used to read the order ledger.
It handles the connection, collection access, aggregation queries and the
indexes the sales queries rely on.
"""

from typing import Any, Dict, List, Sequence

import pymongo.errors
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from src.shared import (
    ORDER_ITEMS_COLLECTION,
    ORDERS_COLLECTION,
    PRODUCTS_COLLECTION,
    get_logger,
)

logger = get_logger(__name__)

# (collection, field, index name)
LEDGER_INDEXES = (
    (ORDERS_COLLECTION, "id", "order_id_idx"),
    (ORDERS_COLLECTION, "order_date", "order_date_idx"),
    (ORDERS_COLLECTION, "status", "order_status_idx"),
    (ORDER_ITEMS_COLLECTION, "order_id", "item_order_id_idx"),
    (ORDER_ITEMS_COLLECTION, "product_id", "item_product_id_idx"),
    (PRODUCTS_COLLECTION, "id", "product_id_idx"),
)


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
        """
        self.client: MongoClient = MongoClient(mongo_uri)
        self.db: Database = self.client[db_name]

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a collection from the database.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB collection
        """
        return self.db[collection_name]

    async def list_collection_names(self) -> List[str]:
        """Names of the collections that currently exist in the database."""
        return list(self.db.list_collection_names())

    async def aggregate(
        self, collection_name: str, pipeline: Sequence[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        """
        Run an aggregation pipeline on a collection.

        Args:
            collection_name: Name of the collection the pipeline starts from
            pipeline: Aggregation stages

        Returns:
            The resulting documents
        """
        return list(self.get_collection(collection_name).aggregate(list(pipeline)))

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    async def create_indexes(self) -> None:
        """
        Create the indexes used by the sales aggregation pipelines.
        Called once during application startup.
        """
        for collection_name, field, index_name in LEDGER_INDEXES:
            try:
                collection = self.get_collection(collection_name)
                collection.create_index(field, name=index_name)
            except pymongo.errors.OperationFailure as e:
                logger.warning(
                    "mongo.index.create_failed",
                    collection=collection_name,
                    index=index_name,
                    error=str(e),
                )
