"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class SystemInfo:
    """Subset of configuration required by system-related use cases."""

    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    mongo_uri: str
    database_name: str
    estimator: Dict[str, Any] = field(default_factory=dict)
