"""DTOs for system health and application info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.health import (
    ApplicationInfo,
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)


class DependencyStatusDTO(BaseModel):
    """Serializable representation of a dependency health check."""

    name: str = Field(description="Dependency identifier")
    status: ServiceStatus = Field(description="Status of the dependency")
    message: Optional[str] = Field(default=None, description="Human readable note")
    checked_at: datetime = Field(description="Timestamp of the check")
    latency_ms: Optional[float] = Field(
        default=None, description="Latency in milliseconds"
    )
    details: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            checked_at=status.checked_at,
            latency_ms=status.latency_ms,
            details=status.details,
        )


class SystemHealthDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: ServiceStatus = Field(description="Overall system status")
    ready_for_predictions: bool = Field(
        default=False,
        description="MongoDB is reachable and every ledger collection exists",
    )
    missing_collections: List[str] = Field(
        default_factory=list, description="Ledger collections not found"
    )
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            ready_for_predictions=health.can_serve_predictions,
            missing_collections=health.missing_collections,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in health.dependencies
            ],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "degraded",
                "ready_for_predictions": False,
                "missing_collections": ["order_items"],
                "dependencies": [
                    {
                        "name": "mongo",
                        "status": "up",
                        "message": "MongoDB ping successful",
                        "checked_at": "2025-03-02T08:00:00Z",
                        "latency_ms": 3.1,
                        "details": {"database": "sales_db"},
                    },
                    {
                        "name": "sales_ledger",
                        "status": "degraded",
                        "message": "Order ledger collections missing",
                        "checked_at": "2025-03-02T08:00:00Z",
                        "latency_ms": None,
                        "details": {"missing": ["order_items"]},
                    },
                ],
            }
        }
    }


class ApplicationInfoDTO(BaseModel):
    """DTO representing metadata returned by /info."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)
    extras: Dict[str, Any] = Field(
        default_factory=dict,
        description="Database and estimator parameters in effect",
    )

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        return cls(
            name=info.name,
            description=info.description,
            version=info.version,
            environment=info.environment,
            git_commit=info.git_commit,
            build_time=info.build_time,
            started_at=info.started_at,
            uptime_seconds=info.uptime_seconds,
            status=info.status,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in info.dependencies
            ],
            extras=info.extras,
        )
