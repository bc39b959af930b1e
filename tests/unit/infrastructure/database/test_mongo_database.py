from __future__ import annotations

from typing import Any, Dict, List

import pytest
from pymongo.errors import OperationFailure

from src.infrastructure.database.mongo_database import LEDGER_INDEXES, MongoDatabase


class _StubCollection:
    def __init__(self, documents: List[Dict[str, Any]]) -> None:
        self.documents = documents
        self.pipelines: List[List[Dict[str, Any]]] = []
        self.created_indexes: List[tuple] = []
        self.fail_index_creation = False

    def aggregate(self, pipeline):
        self.pipelines.append(pipeline)
        return iter(self.documents)

    def create_index(self, field, name=None):
        if self.fail_index_creation:
            raise OperationFailure("index conflict")
        self.created_indexes.append((field, name))
        return name


class _StubDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, _StubCollection] = {}
        self.name = "sales_db"

    def __getitem__(self, name: str) -> _StubCollection:
        return self.collections.setdefault(name, _StubCollection([]))

    def list_collection_names(self) -> List[str]:
        return list(self.collections)


class _StubMongoClient:
    def __init__(self, uri: str) -> None:
        self.uri = uri
        self.databases: Dict[str, _StubDatabase] = {}
        self.closed = False

    def __getitem__(self, name: str) -> _StubDatabase:
        return self.databases.setdefault(name, _StubDatabase())

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def patch_mongo_client(monkeypatch) -> None:
    monkeypatch.setattr(
        "src.infrastructure.database.mongo_database.MongoClient",
        _StubMongoClient,
    )


@pytest.mark.asyncio
async def test_aggregate_returns_documents_as_list() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "sales_db")
    collection = database.get_collection("order_items")
    collection.documents = [{"_id": 1}, {"_id": 2}]

    pipeline = ({"$match": {"product_id": 1}},)
    result = await database.aggregate("order_items", pipeline)

    assert result == [{"_id": 1}, {"_id": 2}]
    assert collection.pipelines == [[{"$match": {"product_id": 1}}]]


@pytest.mark.asyncio
async def test_list_collection_names() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "sales_db")
    database.get_collection("orders")
    database.get_collection("products")

    assert sorted(await database.list_collection_names()) == ["orders", "products"]


@pytest.mark.asyncio
async def test_create_indexes_covers_ledger_fields() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "sales_db")

    await database.create_indexes()

    created = {
        (collection_name, index_name)
        for collection_name, collection in database.db.collections.items()
        for _, index_name in collection.created_indexes
    }
    assert created == {(name, index) for name, _, index in LEDGER_INDEXES}
    assert ("orders", "order_date_idx") in created


@pytest.mark.asyncio
async def test_create_indexes_tolerates_operation_failures() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "sales_db")
    database.get_collection("orders").fail_index_creation = True

    await database.create_indexes()

    assert database.get_collection("orders").created_indexes == []
    assert database.get_collection("products").created_indexes == [
        ("id", "product_id_idx")
    ]


def test_close_closes_client() -> None:
    database = MongoDatabase("mongodb://localhost:27017", "sales_db")
    database.close()
    assert database.client.closed is True


@pytest.mark.asyncio
async def test_queries_resolve_collections_through_get_collection(monkeypatch) -> None:
    database = MongoDatabase("mongodb://localhost:27017", "sales_db")
    requested: List[str] = []
    original = database.get_collection

    def tracking_get_collection(name: str):
        requested.append(name)
        return original(name)

    monkeypatch.setattr(database, "get_collection", tracking_get_collection)

    await database.aggregate("order_items", [])
    await database.create_indexes()

    assert requested[0] == "order_items"
    assert len(requested) == 1 + len(LEDGER_INDEXES)
