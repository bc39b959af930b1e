from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from src.shared.logging import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)


def test_configure_logging_sets_root_handlers(tmp_path) -> None:
    log_file = tmp_path / "sales.log"
    configure_logging(level="DEBUG", file_path=str(log_file), environment="development")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)

    logger = get_logger(__name__)
    logger.info("structured log test")


@dataclass
class _LoggingSettings:
    level: str = "WARNING"
    format: str = "%(message)s"
    file_path: str | None = None


@dataclass
class _Settings:
    logging: _LoggingSettings
    environment: str = "production"


def test_update_logging_from_settings_applies_configuration() -> None:
    settings = _Settings(logging=_LoggingSettings(level="ERROR"))

    update_logging_from_settings(settings)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.ERROR


def test_production_logging_writes_prediction_events_as_json(tmp_path) -> None:
    log_file = tmp_path / "sales.json.log"
    configure_logging(level="INFO", file_path=str(log_file), environment="production")

    get_logger("src.application.use_cases").info(
        "prediction.completed", observations=14, products=2, execution_time_ms=3.2
    )
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = log_file.read_text().strip().splitlines()
    event = json.loads(lines[-1])
    assert event["event"] == "prediction.completed"
    assert event["products"] == 2
    assert event["observations"] == 14
    assert event["level"] == "info"
    assert event["logger"] == "src.application.use_cases"
