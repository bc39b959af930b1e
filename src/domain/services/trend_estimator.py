"""
Sales trend estimation over per-product daily sales series.

Each product's series is smoothed with a trailing moving average, an
ordinary least-squares line is fitted through the smoothed points and the
line is projected one day past the end of the history. The slope gives the
qualitative trend, the spread of the smoothed series and the plausibility
of the projection give the confidence score, and both select the advisory
text returned to the caller.

Everything here is pure: no I/O, no clock reads, no shared state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence

import numpy as np

from src.domain.entities.sales import Observation, PredictionResult, TrendDirection

VARIABILITY_WEIGHT = 0.7
BOUNDS_WEIGHT = 0.3
IN_BOUNDS_SCORE = 1.0
OUT_OF_BOUNDS_SCORE = 0.5

INSUFFICIENT_HISTORY_MESSAGE = "Insufficient historical data for accurate prediction."
LOW_CONFIDENCE_MESSAGE = (
    "Insufficient data for reliable prediction. Collect more historical data."
)
STRONG_UPWARD_MESSAGE = (
    "Strong upward trend detected. "
    "Consider increasing inventory and marketing investment."
)
MODERATE_UPWARD_MESSAGE = (
    "Moderate upward trend. Monitor closely and prepare for potential demand increase."
)
STRONG_DOWNWARD_MESSAGE = (
    "Strong downward trend detected. Review pricing strategy and consider promotions."
)
MODERATE_DOWNWARD_MESSAGE = (
    "Moderate downward trend. Investigate potential causes and adjust strategy."
)
STABLE_MESSAGE = (
    "Stable sales pattern. Maintain current strategy with regular monitoring."
)


@dataclass(frozen=True)
class TrendEstimatorConfig:
    """Tunable parameters of the trend estimator and its seasonality pass."""

    smoothing_window: int = 3
    trend_threshold: float = 0.1
    low_confidence_threshold: float = 0.4
    high_confidence_threshold: float = 0.7
    insufficient_data_confidence: float = 0.2
    short_series_confidence: float = 0.3
    min_points_for_confidence: int = 3
    weekly_pattern_threshold: float = 0.2
    seasonality_confidence_boost: float = 0.1
    days_per_week: int = 7
    days_per_month: int = 30

    def __post_init__(self) -> None:
        if self.smoothing_window < 1:
            raise ValueError("Smoothing window must be at least 1.")
        if self.trend_threshold < 0:
            raise ValueError("Trend threshold cannot be negative.")
        if not 0.0 <= self.low_confidence_threshold <= self.high_confidence_threshold:
            raise ValueError(
                "Confidence thresholds must satisfy 0 <= low <= high."
            )


DEFAULT_CONFIG = TrendEstimatorConfig()


class LinearFit(NamedTuple):
    slope: float
    intercept: float


def group_by_product(
    observations: Iterable[Observation],
) -> Dict[int, List[Observation]]:
    """Group observations by product id, keeping first-seen order."""
    groups: Dict[int, List[Observation]] = {}
    for observation in observations:
        groups.setdefault(observation.product_id, []).append(observation)
    return groups


def moving_average(values: Sequence[float], window: int = 3) -> np.ndarray:
    """Trailing moving average; the first points average what is available."""
    series = np.asarray(values, dtype=float)
    smoothed = np.empty_like(series)
    for idx in range(series.size):
        smoothed[idx] = series[max(0, idx - window + 1) : idx + 1].mean()
    return smoothed


def linear_regression(values: Sequence[float]) -> LinearFit:
    """Least-squares line through ``(index, value)`` pairs."""
    y = np.asarray(values, dtype=float)
    n = y.size
    if n < 2:
        return LinearFit(slope=0.0, intercept=float(y[0]) if n else 0.0)

    x = np.arange(n, dtype=float)
    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = (x * y).sum()
    sum_xx = (x * x).sum()

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n
    return LinearFit(slope=float(slope), intercept=float(intercept))


def classify_trend(slope: float, threshold: float = 0.1) -> TrendDirection:
    if slope > threshold:
        return TrendDirection.INCREASING
    if slope < -threshold:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


def calculate_confidence(
    smoothed: Sequence[float],
    prediction: float,
    config: TrendEstimatorConfig = DEFAULT_CONFIG,
) -> float:
    """
    Blend series consistency and prediction plausibility into ``[0, 1]``.

    A series whose mean is zero or negative has no meaningful coefficient
    of variation; its variability score is 0 so only the bounds check
    contributes.
    """
    series = np.asarray(smoothed, dtype=float)
    if series.size < config.min_points_for_confidence:
        return config.short_series_confidence

    mean = float(series.mean())
    std = float(series.std())
    variability_score = max(0.0, 1.0 - std / mean) if mean > 0 else 0.0

    lowest = float(series.min())
    highest = float(series.max())
    in_bounds = lowest * 0.5 <= prediction <= highest * 2
    bounds_score = IN_BOUNDS_SCORE if in_bounds else OUT_OF_BOUNDS_SCORE

    confidence = min(
        1.0, VARIABILITY_WEIGHT * variability_score + BOUNDS_WEIGHT * bounds_score
    )
    return _finite_or_zero(max(0.0, confidence))


def build_recommendation(
    trend: TrendDirection,
    confidence: float,
    config: TrendEstimatorConfig = DEFAULT_CONFIG,
) -> str:
    if confidence < config.low_confidence_threshold:
        return LOW_CONFIDENCE_MESSAGE

    strong = confidence > config.high_confidence_threshold
    if trend is TrendDirection.INCREASING:
        return STRONG_UPWARD_MESSAGE if strong else MODERATE_UPWARD_MESSAGE
    if trend is TrendDirection.DECREASING:
        return STRONG_DOWNWARD_MESSAGE if strong else MODERATE_DOWNWARD_MESSAGE
    return STABLE_MESSAGE


def estimate_product(
    product_id: int,
    product_name: str,
    observations: Sequence[Observation],
    config: TrendEstimatorConfig = DEFAULT_CONFIG,
) -> PredictionResult:
    """Build the prediction for a single product's observations."""
    ordered = sorted(observations, key=lambda observation: observation.date)
    values = [float(observation.daily_sales) for observation in ordered]

    if len(values) < 2:
        return _build_result(
            product_id,
            product_name,
            trend=TrendDirection.STABLE,
            daily_sales=values[0] if values else 0.0,
            confidence=config.insufficient_data_confidence,
            recommendation=INSUFFICIENT_HISTORY_MESSAGE,
            config=config,
        )

    smoothed = moving_average(values, config.smoothing_window)
    fit = linear_regression(smoothed)
    predicted = max(0.0, fit.slope * smoothed.size + fit.intercept)

    trend = classify_trend(fit.slope, config.trend_threshold)
    confidence = calculate_confidence(smoothed, predicted, config)

    return _build_result(
        product_id,
        product_name,
        trend=trend,
        daily_sales=predicted,
        confidence=confidence,
        recommendation=build_recommendation(trend, confidence, config),
        config=config,
    )


def predict_sales(
    observations: Iterable[Observation],
    config: Optional[TrendEstimatorConfig] = None,
) -> List[PredictionResult]:
    """
    Predict next-day, weekly and monthly sales for every product.

    Args:
        observations: Daily sales rows in any order, possibly for many
            products and with repeated dates.
        config: Estimator parameters; defaults to ``DEFAULT_CONFIG``.

    Returns:
        One result per distinct product id, highest predicted daily sales
        first.
    """
    config = config or DEFAULT_CONFIG
    results = [
        estimate_product(product_id, rows[0].product_name, rows, config)
        for product_id, rows in group_by_product(observations).items()
    ]
    results.sort(key=lambda result: result.predicted_daily_sales, reverse=True)
    return results


def _build_result(
    product_id: int,
    product_name: str,
    *,
    trend: TrendDirection,
    daily_sales: float,
    confidence: float,
    recommendation: str,
    config: TrendEstimatorConfig,
) -> PredictionResult:
    daily = round(max(0.0, _finite_or_zero(daily_sales)), 2)
    return PredictionResult(
        product_id=product_id,
        product_name=product_name,
        current_trend=trend,
        predicted_daily_sales=daily,
        predicted_weekly_sales=round(daily * config.days_per_week, 2),
        predicted_monthly_sales=round(daily * config.days_per_month, 2),
        confidence_score=round(min(1.0, max(0.0, confidence)), 2),
        recommendation=recommendation,
    )


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0
