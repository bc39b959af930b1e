"""
Domain Layer Package

This package contains the sales trend estimation rules and the entities
they operate on. It has no dependencies on frameworks, databases or
transport concerns.
"""

# Re-export submodules
from src.domain import entities, ports, repositories, services

__all__ = ["entities", "repositories", "services", "ports"]
