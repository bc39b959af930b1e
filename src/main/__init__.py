"""
Main module - Main/Composition Root Layer

Sets up configuration, logging and the dependency container, and exposes
the two entry points: the FastAPI application and the command-line report.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
