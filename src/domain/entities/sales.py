"""Domain entities for daily sales observations and trend predictions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Union

Amount = Union[int, float, Decimal]


class TrendDirection(str, Enum):
    """Qualitative direction of a product's fitted sales trend."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


@dataclass(frozen=True, slots=True)
class Observation:
    """One day of aggregated sales for one product."""

    date: date
    product_id: int
    product_name: str
    daily_sales: Amount
    quantity_sold: int = 0


@dataclass(slots=True)
class PredictionResult:
    """Forecast and advisory text produced for a single product."""

    product_id: int
    product_name: str
    current_trend: TrendDirection
    predicted_daily_sales: float
    predicted_weekly_sales: float
    predicted_monthly_sales: float
    confidence_score: float
    recommendation: str


@dataclass(frozen=True, slots=True)
class SeasonalityReport:
    """Outcome of the day-of-week seasonality check for one product."""

    has_weekly_pattern: bool
    # Monthly cycles are not analysed yet.
    has_monthly_pattern: bool = False


@dataclass(slots=True)
class ProductSalesSummary:
    """Lifetime sales totals for a single product."""

    id: int
    name: str
    price: float
    total_orders: int = 0
    total_quantity: int = 0
    total_revenue: float = 0.0


@dataclass(slots=True)
class SalesOverview:
    """Store-wide sales totals across every order line."""

    total_orders: int = 0
    total_products: int = 0
    total_customers: int = 0
    total_revenue: float = 0.0
    avg_order_value: float = 0.0
