"""Day-of-week seasonality adjustment applied on top of basic predictions."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional, Sequence

import numpy as np

from src.domain.entities.sales import Observation, PredictionResult, SeasonalityReport

from .trend_estimator import (
    DEFAULT_CONFIG,
    TrendEstimatorConfig,
    group_by_product,
    predict_sales,
)

WEEKLY_PATTERN_SUFFIX = " Weekly pattern detected."
DAYS_IN_WEEK = 7


def detect_seasonality(
    observations: Sequence[Observation], threshold: float = 0.2
) -> SeasonalityReport:
    """
    Check whether average sales differ noticeably between weekdays.

    Sales are bucketed by ``date.weekday()``; only weekdays whose
    average sales are positive take part, so days without sales never
    count as the worst weekday. A weekly pattern exists when the gap
    between the best and the worst weekday average exceeds ``threshold``
    as a fraction of the best one.
    """
    if not observations:
        return SeasonalityReport(has_weekly_pattern=False)

    weekdays = np.fromiter(
        (observation.date.weekday() for observation in observations), dtype=int
    )
    sales = np.fromiter(
        (float(observation.daily_sales) for observation in observations), dtype=float
    )
    totals = np.bincount(weekdays, weights=sales, minlength=DAYS_IN_WEEK)
    counts = np.bincount(weekdays, minlength=DAYS_IN_WEEK)

    observed = counts > 0
    averages = totals[observed] / counts[observed]
    selling = averages[averages > 0]
    if selling.size == 0:
        return SeasonalityReport(has_weekly_pattern=False)

    peak = float(selling.max())
    trough = float(selling.min())
    return SeasonalityReport(has_weekly_pattern=(peak - trough) / peak > threshold)


def apply_seasonality(
    predictions: Iterable[PredictionResult],
    observations: Iterable[Observation],
    config: Optional[TrendEstimatorConfig] = None,
) -> List[PredictionResult]:
    """Boost confidence and annotate products that show a weekly pattern."""
    config = config or DEFAULT_CONFIG
    groups = group_by_product(observations)

    adjusted: List[PredictionResult] = []
    for prediction in predictions:
        report = detect_seasonality(
            groups.get(prediction.product_id, []), config.weekly_pattern_threshold
        )
        if report.has_weekly_pattern:
            prediction = replace(
                prediction,
                confidence_score=min(
                    1.0,
                    prediction.confidence_score + config.seasonality_confidence_boost,
                ),
                recommendation=prediction.recommendation + WEEKLY_PATTERN_SUFFIX,
            )
        adjusted.append(prediction)
    return adjusted


def predict_sales_with_seasonality(
    observations: Iterable[Observation],
    config: Optional[TrendEstimatorConfig] = None,
) -> List[PredictionResult]:
    """Basic prediction followed by the weekly seasonality pass."""
    rows = list(observations)
    return apply_seasonality(predict_sales(rows, config), rows, config)
