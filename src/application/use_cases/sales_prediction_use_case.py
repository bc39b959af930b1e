"""
Application Use Case - Sales Prediction

Loads the trailing daily sales history from the order ledger and runs the
trend estimator over it, optionally followed by the weekly seasonality
pass. Also serves the per-product analytics summary shown next to the
predictions.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from time import perf_counter
from typing import Callable, List, Optional, Sequence

import structlog

from src.application.dtos.prediction_dto import (
    PredictionMetadataDTO,
    PredictionResultDTO,
    ProductAnalyticsResponseDTO,
    ProductSummaryDTO,
    SalesOverviewDTO,
    SalesPredictionRequestDTO,
    SalesPredictionResponseDTO,
)
from src.domain.entities.errors import SalesDataUnavailableError
from src.domain.entities.sales import Observation
from src.domain.repositories.sales_history_repository import ISalesHistoryRepository
from src.domain.services import (
    DEFAULT_CONFIG,
    TrendEstimatorConfig,
    predict_sales,
    predict_sales_with_seasonality,
)

logger = structlog.get_logger(__name__)


class SalesPredictionError(Exception):
    """Base exception for prediction failures."""

    pass


class SalesPredictionDependencyError(SalesPredictionError):
    """Raised when the sales ledger cannot be read."""

    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RunSalesPredictionUseCase:
    """Predict per-product sales from the trailing order history."""

    def __init__(
        self,
        sales_history_repository: ISalesHistoryRepository,
        estimator_config: TrendEstimatorConfig = DEFAULT_CONFIG,
        default_period_days: int = 30,
        order_statuses: Optional[Sequence[str]] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.sales_history_repository = sales_history_repository
        self.estimator_config = estimator_config
        self.default_period_days = default_period_days
        self.order_statuses = tuple(order_statuses) if order_statuses else None
        self._clock = clock

    async def execute(
        self, request: SalesPredictionRequestDTO
    ) -> SalesPredictionResponseDTO:
        """
        Run the prediction for the requested window and products.

        Raises:
            SalesDataUnavailableError: If the ledger collections are missing
            SalesPredictionDependencyError: If the ledger cannot be read
        """
        period = request.period or self.default_period_days
        logger.info(
            "prediction.start",
            period=period,
            product_ids=request.product_ids,
            advanced=request.advanced,
        )
        started = perf_counter()

        await self._ensure_ledger_ready()
        observations = await self._load_observations(period, request.product_ids)

        estimate = predict_sales_with_seasonality if request.advanced else predict_sales
        predictions = estimate(observations, self.estimator_config)

        execution_time_ms = (perf_counter() - started) * 1000
        logger.info(
            "prediction.completed",
            observations=len(observations),
            products=len(predictions),
            execution_time_ms=round(execution_time_ms, 2),
        )

        return SalesPredictionResponseDTO(
            predictions=[PredictionResultDTO.from_domain(p) for p in predictions],
            execution_time_ms=execution_time_ms,
            metadata=PredictionMetadataDTO(
                period=period,
                product_count=len(request.product_ids),
                advanced_mode=request.advanced,
            ),
        )

    async def _ensure_ledger_ready(self) -> None:
        try:
            missing = await self.sales_history_repository.missing_collections()
        except Exception as exc:
            raise SalesPredictionDependencyError(
                f"Unable to inspect the sales ledger: {exc}"
            ) from exc

        if missing:
            logger.warning("prediction.ledger_missing", missing=missing)
            raise SalesDataUnavailableError(missing)

    async def _load_observations(
        self, period: int, product_ids: List[int]
    ) -> List[Observation]:
        since = self._clock() - timedelta(days=period)
        try:
            return await self.sales_history_repository.fetch_daily_sales(
                since,
                product_ids=product_ids or None,
                statuses=self.order_statuses,
            )
        except Exception as exc:
            raise SalesPredictionDependencyError(
                f"Unable to load sales history: {exc}"
            ) from exc


class GetProductAnalyticsUseCase:
    """Return products ranked by revenue together with store-wide totals."""

    def __init__(self, sales_history_repository: ISalesHistoryRepository):
        self.sales_history_repository = sales_history_repository

    async def execute(self) -> ProductAnalyticsResponseDTO:
        try:
            summaries = await self.sales_history_repository.fetch_product_summaries()
            overview = await self.sales_history_repository.fetch_sales_overview()
        except Exception as exc:
            raise SalesPredictionDependencyError(
                f"Unable to load product analytics: {exc}"
            ) from exc

        logger.debug("analytics.loaded", products=len(summaries))
        return ProductAnalyticsResponseDTO(
            products=[ProductSummaryDTO.from_domain(s) for s in summaries],
            analytics=SalesOverviewDTO.from_domain(overview),
        )
