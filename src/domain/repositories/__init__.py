"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .sales_history_repository import ISalesHistoryRepository

__all__ = ["ISalesHistoryRepository"]
