from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.application.dtos.prediction_dto import (
    PredictionResultDTO,
    ProductSummaryDTO,
    SalesOverviewDTO,
    SalesPredictionRequestDTO,
)
from src.domain.entities.sales import (
    PredictionResult,
    ProductSalesSummary,
    SalesOverview,
    TrendDirection,
)


def test_request_defaults() -> None:
    request = SalesPredictionRequestDTO()
    assert request.period is None
    assert request.product_ids == []
    assert request.advanced is False


@pytest.mark.parametrize("period", [0, -5, 366])
def test_request_rejects_out_of_range_period(period: int) -> None:
    with pytest.raises(ValidationError):
        SalesPredictionRequestDTO(period=period)


def test_prediction_result_dto_from_domain() -> None:
    result = PredictionResult(
        product_id=1,
        product_name="Wireless Mouse",
        current_trend=TrendDirection.INCREASING,
        predicted_daily_sales=45.5,
        predicted_weekly_sales=318.5,
        predicted_monthly_sales=1365.0,
        confidence_score=0.67,
        recommendation="Moderate upward trend.",
    )

    dto = PredictionResultDTO.from_domain(result)

    assert dto.product_name == "Wireless Mouse"
    assert dto.model_dump(mode="json")["current_trend"] == "increasing"
    assert dto.confidence_score == 0.67


def test_summary_and_overview_dtos_from_domain() -> None:
    summary = ProductSummaryDTO.from_domain(
        ProductSalesSummary(id=3, name="Monitor", price=199.0, total_orders=2)
    )
    overview = SalesOverviewDTO.from_domain(SalesOverview(total_revenue=398.0))

    assert summary.total_orders == 2
    assert summary.total_revenue == 0.0
    assert overview.total_revenue == 398.0
    assert overview.total_customers == 0
