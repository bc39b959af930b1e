"""Domain services: pure sales trend estimation and seasonality analysis."""

from .seasonality import (
    apply_seasonality,
    detect_seasonality,
    predict_sales_with_seasonality,
)
from .trend_estimator import (
    DEFAULT_CONFIG,
    TrendEstimatorConfig,
    build_recommendation,
    calculate_confidence,
    classify_trend,
    estimate_product,
    group_by_product,
    linear_regression,
    moving_average,
    predict_sales,
)

__all__ = [
    "DEFAULT_CONFIG",
    "TrendEstimatorConfig",
    "apply_seasonality",
    "build_recommendation",
    "calculate_confidence",
    "classify_trend",
    "detect_seasonality",
    "estimate_product",
    "group_by_product",
    "linear_regression",
    "moving_average",
    "predict_sales",
    "predict_sales_with_seasonality",
]
