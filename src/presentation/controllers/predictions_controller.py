"""
Presentation Layer - Predictions Controller

Exposes the sales prediction run and the product analytics summary.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from src.application.dtos.prediction_dto import (
    ProductAnalyticsResponseDTO,
    SalesPredictionRequestDTO,
    SalesPredictionResponseDTO,
)
from src.application.use_cases.sales_prediction_use_case import (
    GetProductAnalyticsUseCase,
    RunSalesPredictionUseCase,
    SalesPredictionDependencyError,
    SalesPredictionError,
)
from src.domain.entities.errors import SalesDataUnavailableError
from src.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/predictions", tags=["Predictions"])


@router.post(
    "",
    response_model=SalesPredictionResponseDTO,
    summary="Predict sales per product",
    description="""
    Aggregate the order ledger into daily sales per product over the trailing
    period, fit a trend line per product and return next-day, weekly and
    monthly predictions with a confidence score and a recommendation.
    Set `advanced` to apply the weekly seasonality adjustment.
    """,
)
@inject
async def run_prediction(
    payload: SalesPredictionRequestDTO,
    prediction_use_case: RunSalesPredictionUseCase = Depends(
        Provide[AppContainer.run_sales_prediction_use_case]
    ),
) -> SalesPredictionResponseDTO:
    try:
        return await prediction_use_case.execute(payload)
    except SalesDataUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    except SalesPredictionDependencyError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
    except SalesPredictionError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except Exception as exc:  # pragma: no cover - defensive logging
        logger.error(
            "prediction.unexpected_error",
            period=payload.period,
            product_ids=payload.product_ids,
            error=str(exc),
            exc_info=exc,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error executing prediction algorithm",
        )


@router.get(
    "/products",
    response_model=ProductAnalyticsResponseDTO,
    summary="Products ranked by revenue with store-wide totals",
)
@inject
async def get_product_analytics(
    analytics_use_case: GetProductAnalyticsUseCase = Depends(
        Provide[AppContainer.get_product_analytics_use_case]
    ),
) -> ProductAnalyticsResponseDTO:
    try:
        return await analytics_use_case.execute()
    except SalesPredictionDependencyError as exc:
        logger.error("analytics.load_failed", error=str(exc))
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
