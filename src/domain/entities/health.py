"""
Health domain entities.

Value objects describing the availability of the service and of the
sales ledger it reads from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

MONGO_DEPENDENCY = "mongo"
SALES_LEDGER_DEPENDENCY = "sales_ledger"


class ServiceStatus(str, Enum):
    """High-level availability for a dependency or the system."""

    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"


@dataclass(slots=True)
class DependencyStatus:
    """Result of probing one external dependency."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SystemHealth:
    """Aggregated health for the service."""

    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)

    def dependency(self, name: str) -> Optional[DependencyStatus]:
        return next((dep for dep in self.dependencies if dep.name == name), None)

    @property
    def missing_collections(self) -> List[str]:
        """Ledger collections reported missing by the last probe."""
        ledger = self.dependency(SALES_LEDGER_DEPENDENCY)
        if ledger is None:
            return []
        return list(ledger.details.get("missing", []))

    @property
    def can_serve_predictions(self) -> bool:
        """Predictions need a reachable database holding the full ledger."""
        return all(
            dep is not None and dep.status == ServiceStatus.UP
            for dep in (
                self.dependency(MONGO_DEPENDENCY),
                self.dependency(SALES_LEDGER_DEPENDENCY),
            )
        )


@dataclass(slots=True)
class ApplicationInfo:
    """Operational metadata surfaced by the /info endpoint."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)
    extras: Dict[str, Any] = field(default_factory=dict)
