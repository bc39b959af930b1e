"""
Repositories Package - Infrastructure Layer

Concrete implementations of the repository interfaces defined in the
domain layer.
"""

from .sales_history_repository import SalesHistoryRepository

__all__ = ["SalesHistoryRepository"]
