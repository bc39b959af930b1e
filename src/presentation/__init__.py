"""
Presentation Layer Package

HTTP surface of the service: prediction, analytics and system routes.
"""

from src.presentation import controllers

__all__ = ["controllers"]
