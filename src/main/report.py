#!/usr/bin/env python3
"""
Report Entry Point - Main Layer

Runs one sales prediction against the configured order ledger and prints a
block per product. With ``--serve`` it starts the HTTP API instead. Both the
API and the report are entry points of the Main layer.
"""

import argparse
import asyncio
from typing import List, Optional, Sequence

import uvicorn
from pydantic import ValidationError

from src.application.dtos.prediction_dto import (
    SalesPredictionRequestDTO,
    SalesPredictionResponseDTO,
)
from src.application.use_cases.sales_prediction_use_case import SalesPredictionError
from src.domain.entities.errors import DomainError
from src.main.config import get_settings
from src.main.container import init_container
from src.shared import configure_logging, get_logger, update_logging_from_settings

configure_logging()

settings = get_settings()
update_logging_from_settings(settings)

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.main",
        description="Predict per-product sales from the order ledger.",
    )
    parser.add_argument(
        "--period",
        type=int,
        default=None,
        help="Days of history to use (default: PREDICTION_DEFAULT_PERIOD_DAYS)",
    )
    parser.add_argument(
        "--product-id",
        dest="product_ids",
        type=int,
        action="append",
        default=[],
        help="Only predict this product; repeat for several products",
    )
    parser.add_argument(
        "--advanced",
        action="store_true",
        help="Apply the weekly seasonality adjustment",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the HTTP API instead of printing a report",
    )
    return parser


def format_report(response: SalesPredictionResponseDTO) -> str:
    if not response.predictions:
        return "No sales recorded in the selected period."

    lines: List[str] = ["Sales Predictions:"]
    for prediction in response.predictions:
        lines.extend(
            [
                f"Product: {prediction.product_name}",
                f"Trend: {prediction.current_trend.value}",
                f"Predicted Daily Sales: ${prediction.predicted_daily_sales:.2f}",
                f"Predicted Weekly Sales: ${prediction.predicted_weekly_sales:.2f}",
                f"Predicted Monthly Sales: ${prediction.predicted_monthly_sales:.2f}",
                f"Confidence: {prediction.confidence_score * 100:.1f}%",
                f"Recommendation: {prediction.recommendation}",
                "---",
            ]
        )
    return "\n".join(lines)


async def run_report(request: SalesPredictionRequestDTO) -> SalesPredictionResponseDTO:
    container = init_container(get_settings())
    mongo_database = container.mongo_database()
    try:
        use_case = container.run_sales_prediction_use_case()
        return await use_case.execute(request)
    finally:
        mongo_database.close()


def serve() -> None:
    current = get_settings()
    logger.info(
        "Starting HTTP server",
        host=current.service.host,
        port=current.service.port,
    )
    uvicorn.run(
        "src.main.app:app",
        host=current.service.host,
        port=current.service.port,
        reload=current.service.reload,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point; returns the process exit status."""

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.serve:
        serve()
        return 0

    try:
        request = SalesPredictionRequestDTO(
            period=args.period,
            product_ids=args.product_ids,
            advanced=args.advanced,
        )
    except ValidationError as exc:
        parser.error(str(exc))

    try:
        response = asyncio.run(run_report(request))
    except (DomainError, SalesPredictionError) as exc:
        logger.error("report.failed", error=str(exc))
        return 1

    print(format_report(response))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
