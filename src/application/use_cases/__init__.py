"""
Use Cases Package - Application Layer

Use cases orchestrate the flow of data between the order ledger, the
trend estimator and the presentation layer.
"""

from .health_use_cases import GetApplicationInfoUseCase, GetHealthStatusUseCase
from .sales_prediction_use_case import (
    GetProductAnalyticsUseCase,
    RunSalesPredictionUseCase,
    SalesPredictionDependencyError,
    SalesPredictionError,
)

__all__ = [
    "RunSalesPredictionUseCase",
    "GetProductAnalyticsUseCase",
    "SalesPredictionError",
    "SalesPredictionDependencyError",
    "GetHealthStatusUseCase",
    "GetApplicationInfoUseCase",
]
