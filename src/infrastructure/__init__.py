"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the MongoDB order
ledger and dependency health probes.
"""

from src.infrastructure import repositories

__all__ = ["repositories"]
