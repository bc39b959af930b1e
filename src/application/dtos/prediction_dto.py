"""
Application DTOs - Sales Prediction

Data Transfer Objects for the sales prediction run and the product
analytics summary.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.sales import (
    PredictionResult,
    ProductSalesSummary,
    SalesOverview,
    TrendDirection,
)


class SalesPredictionRequestDTO(BaseModel):
    """Parameters of a prediction run."""

    period: Optional[int] = Field(
        default=None,
        ge=1,
        le=365,
        description="Trailing window of history, in days (service default if omitted)",
    )
    product_ids: List[int] = Field(
        default_factory=list,
        description="Restrict the run to these products (all products if empty)",
    )
    advanced: bool = Field(
        default=False,
        description="Apply the weekly seasonality adjustment",
    )


class PredictionResultDTO(BaseModel):
    """Prediction for a single product."""

    product_id: int
    product_name: str
    current_trend: TrendDirection
    predicted_daily_sales: float = Field(ge=0)
    predicted_weekly_sales: float = Field(ge=0)
    predicted_monthly_sales: float = Field(ge=0)
    confidence_score: float = Field(ge=0, le=1)
    recommendation: str

    @classmethod
    def from_domain(cls, result: PredictionResult) -> "PredictionResultDTO":
        return cls(
            product_id=result.product_id,
            product_name=result.product_name,
            current_trend=result.current_trend,
            predicted_daily_sales=result.predicted_daily_sales,
            predicted_weekly_sales=result.predicted_weekly_sales,
            predicted_monthly_sales=result.predicted_monthly_sales,
            confidence_score=result.confidence_score,
            recommendation=result.recommendation,
        )


class PredictionMetadataDTO(BaseModel):
    """Echo of the parameters the run was executed with."""

    period: int
    product_count: int
    advanced_mode: bool


class SalesPredictionResponseDTO(BaseModel):
    """Response of the prediction endpoint."""

    success: bool = True
    predictions: List[PredictionResultDTO]
    execution_time_ms: float
    metadata: PredictionMetadataDTO

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "predictions": [
                    {
                        "product_id": 1,
                        "product_name": "Wireless Mouse",
                        "current_trend": "increasing",
                        "predicted_daily_sales": 45.5,
                        "predicted_weekly_sales": 318.5,
                        "predicted_monthly_sales": 1365.0,
                        "confidence_score": 0.67,
                        "recommendation": "Moderate upward trend. Monitor closely "
                        "and prepare for potential demand increase.",
                    }
                ],
                "execution_time_ms": 12.4,
                "metadata": {"period": 30, "product_count": 0, "advanced_mode": False},
            }
        }
    }


class ProductSummaryDTO(BaseModel):
    """Lifetime sales totals for one product."""

    id: int
    name: str
    price: float
    total_orders: int
    total_quantity: int
    total_revenue: float

    @classmethod
    def from_domain(cls, summary: ProductSalesSummary) -> "ProductSummaryDTO":
        return cls(
            id=summary.id,
            name=summary.name,
            price=summary.price,
            total_orders=summary.total_orders,
            total_quantity=summary.total_quantity,
            total_revenue=summary.total_revenue,
        )


class SalesOverviewDTO(BaseModel):
    """Store-wide sales totals."""

    total_orders: int
    total_products: int
    total_customers: int
    total_revenue: float
    avg_order_value: float

    @classmethod
    def from_domain(cls, overview: SalesOverview) -> "SalesOverviewDTO":
        return cls(
            total_orders=overview.total_orders,
            total_products=overview.total_products,
            total_customers=overview.total_customers,
            total_revenue=overview.total_revenue,
            avg_order_value=overview.avg_order_value,
        )


class ProductAnalyticsResponseDTO(BaseModel):
    """Products ranked by revenue plus the store-wide overview."""

    success: bool = True
    products: List[ProductSummaryDTO]
    analytics: SalesOverviewDTO
