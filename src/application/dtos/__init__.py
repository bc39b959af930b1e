"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .health_dto import ApplicationInfoDTO, DependencyStatusDTO, SystemHealthDTO
from .prediction_dto import (
    PredictionMetadataDTO,
    PredictionResultDTO,
    ProductAnalyticsResponseDTO,
    ProductSummaryDTO,
    SalesOverviewDTO,
    SalesPredictionRequestDTO,
    SalesPredictionResponseDTO,
)

__all__ = [
    "SystemHealthDTO",
    "DependencyStatusDTO",
    "ApplicationInfoDTO",
    "SalesPredictionRequestDTO",
    "SalesPredictionResponseDTO",
    "PredictionResultDTO",
    "PredictionMetadataDTO",
    "ProductSummaryDTO",
    "SalesOverviewDTO",
    "ProductAnalyticsResponseDTO",
]
