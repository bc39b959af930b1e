"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager
from dataclasses import asdict

from dependency_injector import containers, providers

from src.application.models import SystemInfo
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.application.use_cases.sales_prediction_use_case import (
    GetProductAnalyticsUseCase,
    RunSalesPredictionUseCase,
)
from src.domain.services import TrendEstimatorConfig
from src.infrastructure.database import MongoDatabase
from src.infrastructure.repositories.sales_history_repository import (
    SalesHistoryRepository,
)
from src.infrastructure.services.health_check_service import HealthCheckService
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
    )

    sales_history_repository = providers.Singleton(
        SalesHistoryRepository,
        mongo_database=mongo_database,
        default_statuses=config.prediction.order_statuses,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        mongo_database=mongo_database,
    )

    # Domain
    estimator_config = providers.Singleton(
        TrendEstimatorConfig,
        smoothing_window=config.prediction.smoothing_window,
        trend_threshold=config.prediction.trend_threshold,
        low_confidence_threshold=config.prediction.low_confidence_threshold,
        high_confidence_threshold=config.prediction.high_confidence_threshold,
        insufficient_data_confidence=config.prediction.insufficient_data_confidence,
        short_series_confidence=config.prediction.short_series_confidence,
        min_points_for_confidence=config.prediction.min_points_for_confidence,
        weekly_pattern_threshold=config.prediction.weekly_pattern_threshold,
        seasonality_confidence_boost=config.prediction.seasonality_confidence_boost,
    )

    # Application (use cases)
    run_sales_prediction_use_case = providers.Factory(
        RunSalesPredictionUseCase,
        sales_history_repository=sales_history_repository,
        estimator_config=estimator_config,
        default_period_days=config.prediction.default_period_days,
        order_statuses=config.prediction.order_statuses,
    )

    get_product_analytics_use_case = providers.Factory(
        GetProductAnalyticsUseCase,
        sales_history_repository=sales_history_repository,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.service.title,
        description=config.service.description,
        version=config.service.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.service.git_commit,
        build_time=config.service.build_time,
        mongo_uri=config.database.mongo_uri,
        database_name=config.database.database_name,
        estimator=providers.Callable(asdict, estimator_config),
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Manage the MongoDB connection for the lifetime of the application.

    Ensures the ledger indexes exist on startup and closes the client on
    shutdown.
    """
    container = get_container()
    mongo_database = container.mongo_database()

    try:
        logger.info("container.mongo.ensure_indexes")
        await mongo_database.create_indexes()
        logger.info("container.resources.initialized")
        yield container
    finally:
        logger.info("container.mongo.close")
        mongo_database.close()
        logger.info("container.resources.shutdown")
