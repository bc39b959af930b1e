"""Infrastructure implementation for system health checks."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Iterable, List, Optional

from src.domain.entities.health import (
    MONGO_DEPENDENCY,
    SALES_LEDGER_DEPENDENCY,
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)
from src.domain.ports.health_check import IHealthCheckService
from src.infrastructure.database.mongo_database import MongoDatabase
from src.shared import REQUIRED_COLLECTIONS


class HealthCheckService(IHealthCheckService):
    """Probe MongoDB and the order ledger collections."""

    def __init__(self, mongo_database: Optional[MongoDatabase]) -> None:
        self._mongo_database = mongo_database

    async def evaluate(self) -> SystemHealth:
        dependency_statuses: List[DependencyStatus] = [
            await self._check_mongo(),
            await self._check_ledger(),
        ]
        overall_status = self._aggregate_status(dependency_statuses)
        return SystemHealth(status=overall_status, dependencies=dependency_statuses)

    def _aggregate_status(self, statuses: Iterable[DependencyStatus]) -> ServiceStatus:
        has_unknown = False
        has_degraded = False

        for status in statuses:
            if status.status == ServiceStatus.DOWN:
                return ServiceStatus.DOWN
            if status.status == ServiceStatus.DEGRADED:
                has_degraded = True
            if status.status == ServiceStatus.UNKNOWN:
                has_unknown = True

        if has_degraded:
            return ServiceStatus.DEGRADED
        if has_unknown:
            return ServiceStatus.UNKNOWN
        return ServiceStatus.UP

    async def _check_mongo(self) -> DependencyStatus:
        if not self._mongo_database:
            return DependencyStatus(
                name=MONGO_DEPENDENCY,
                status=ServiceStatus.UNKNOWN,
                message="Mongo database client not configured.",
            )

        start = perf_counter()
        try:
            await asyncio.to_thread(self._mongo_database.client.admin.command, "ping")
            latency_ms = (perf_counter() - start) * 1000
            return DependencyStatus(
                name=MONGO_DEPENDENCY,
                status=ServiceStatus.UP,
                message="MongoDB ping successful",
                latency_ms=latency_ms,
                details={"database": self._mongo_database.db.name},
            )
        except Exception as exc:
            latency_ms = (perf_counter() - start) * 1000
            return DependencyStatus(
                name=MONGO_DEPENDENCY,
                status=ServiceStatus.DOWN,
                message=f"MongoDB ping failed: {exc}",
                latency_ms=latency_ms,
            )

    async def _check_ledger(self) -> DependencyStatus:
        """A reachable database without the ledger collections is degraded."""
        if not self._mongo_database:
            return DependencyStatus(
                name=SALES_LEDGER_DEPENDENCY,
                status=ServiceStatus.UNKNOWN,
                message="Mongo database client not configured.",
            )

        try:
            existing = set(await self._mongo_database.list_collection_names())
        except Exception as exc:
            return DependencyStatus(
                name=SALES_LEDGER_DEPENDENCY,
                status=ServiceStatus.DOWN,
                message=f"Unable to list collections: {exc}",
            )

        missing = [name for name in REQUIRED_COLLECTIONS if name not in existing]
        if missing:
            return DependencyStatus(
                name=SALES_LEDGER_DEPENDENCY,
                status=ServiceStatus.DEGRADED,
                message="Order ledger collections missing",
                details={"missing": missing},
            )
        return DependencyStatus(
            name=SALES_LEDGER_DEPENDENCY,
            status=ServiceStatus.UP,
            message="Order ledger collections present",
            details={"collections": list(REQUIRED_COLLECTIONS)},
        )
