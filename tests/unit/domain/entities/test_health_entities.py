from __future__ import annotations

from src.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)


def _health(mongo: ServiceStatus, ledger: DependencyStatus | None) -> SystemHealth:
    dependencies = [DependencyStatus(name="mongo", status=mongo)]
    if ledger is not None:
        dependencies.append(ledger)
    return SystemHealth(status=mongo, dependencies=dependencies)


def test_ready_when_database_and_ledger_are_up() -> None:
    health = _health(
        ServiceStatus.UP, DependencyStatus(name="sales_ledger", status=ServiceStatus.UP)
    )
    assert health.can_serve_predictions is True
    assert health.missing_collections == []


def test_missing_collections_come_from_ledger_probe() -> None:
    ledger = DependencyStatus(
        name="sales_ledger",
        status=ServiceStatus.DEGRADED,
        details={"missing": ["order_items"]},
    )
    health = _health(ServiceStatus.UP, ledger)

    assert health.dependency("sales_ledger") is ledger
    assert health.missing_collections == ["order_items"]
    assert health.can_serve_predictions is False


def test_not_ready_without_ledger_probe() -> None:
    health = _health(ServiceStatus.UP, None)
    assert health.dependency("sales_ledger") is None
    assert health.can_serve_predictions is False
