from __future__ import annotations

from types import SimpleNamespace
from typing import cast

import pytest

from src.domain.entities.health import DependencyStatus, ServiceStatus
from src.infrastructure.database.mongo_database import MongoDatabase
from src.infrastructure.services.health_check_service import HealthCheckService
from tests.conftest import FakeMongoDatabase


def _pingable(database: FakeMongoDatabase, fail: bool = False) -> FakeMongoDatabase:
    def command(cmd: str) -> None:
        if fail:
            raise RuntimeError("mongo error")
        if cmd != "ping":
            raise ValueError("Unexpected command")

    database.client = SimpleNamespace(admin=SimpleNamespace(command=command))
    database.db = SimpleNamespace(name="sales_db")
    return database


def _make_service(database: FakeMongoDatabase) -> HealthCheckService:
    return HealthCheckService(mongo_database=cast(MongoDatabase, database))


def test_aggregate_status_priority() -> None:
    service = HealthCheckService(mongo_database=None)
    statuses = [
        DependencyStatus(name="mongo", status=ServiceStatus.UP),
        DependencyStatus(name="sales_ledger", status=ServiceStatus.DEGRADED),
    ]
    assert service._aggregate_status(statuses) is ServiceStatus.DEGRADED
    statuses.append(DependencyStatus(name="other", status=ServiceStatus.DOWN))
    assert service._aggregate_status(statuses) is ServiceStatus.DOWN


@pytest.mark.asyncio
async def test_evaluate_all_up() -> None:
    service = _make_service(_pingable(FakeMongoDatabase()))

    health = await service.evaluate()

    assert health.status is ServiceStatus.UP
    assert [d.name for d in health.dependencies] == ["mongo", "sales_ledger"]
    assert health.dependencies[0].details == {"database": "sales_db"}


@pytest.mark.asyncio
async def test_missing_ledger_collections_degrade_service() -> None:
    database = _pingable(FakeMongoDatabase(collections=["products"]))

    health = await _make_service(database).evaluate()

    assert health.status is ServiceStatus.DEGRADED
    ledger = health.dependencies[1]
    assert ledger.status is ServiceStatus.DEGRADED
    assert ledger.details == {"missing": ["orders", "order_items"]}


@pytest.mark.asyncio
async def test_check_mongo_handles_failure() -> None:
    service = _make_service(_pingable(FakeMongoDatabase(), fail=True))

    status = await service._check_mongo()

    assert status.status is ServiceStatus.DOWN
    assert "mongo error" in (status.message or "")


@pytest.mark.asyncio
async def test_unconfigured_database_is_unknown() -> None:
    health = await HealthCheckService(mongo_database=None).evaluate()
    assert health.status is ServiceStatus.UNKNOWN
