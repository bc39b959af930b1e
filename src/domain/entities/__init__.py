"""
Domain Entities Package

This package contains the core domain entities: sales observations,
trend predictions, health value objects and domain errors.
"""

from .errors import DomainError, SalesDataUnavailableError
from .health import ApplicationInfo, DependencyStatus, ServiceStatus, SystemHealth
from .sales import (
    Observation,
    PredictionResult,
    ProductSalesSummary,
    SalesOverview,
    SeasonalityReport,
    TrendDirection,
)

__all__ = [
    "Observation",
    "PredictionResult",
    "ProductSalesSummary",
    "SalesOverview",
    "SeasonalityReport",
    "TrendDirection",
    "SystemHealth",
    "DependencyStatus",
    "ServiceStatus",
    "ApplicationInfo",
    "DomainError",
    "SalesDataUnavailableError",
]
