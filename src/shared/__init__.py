"""
Shared module - Cross-cutting concerns / Shared Layer

Enums, ledger collection names and logging helpers used by every layer.
It must not depend on Infrastructure or Frameworks.
"""

from .consts import (
    DEFAULT_ORDER_STATUSES,
    ORDER_ITEMS_COLLECTION,
    ORDERS_COLLECTION,
    PRODUCTS_COLLECTION,
    REQUIRED_COLLECTIONS,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "PRODUCTS_COLLECTION",
    "ORDERS_COLLECTION",
    "ORDER_ITEMS_COLLECTION",
    "REQUIRED_COLLECTIONS",
    "DEFAULT_ORDER_STATUSES",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
