"""
Application Layer Package

Use cases and DTOs that connect the order ledger to the trend estimator
and shape the results for the presentation layer.
"""

# Re-export submodules
from src.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
