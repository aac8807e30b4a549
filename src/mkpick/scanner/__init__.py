"""Build-file discovery, target caching, and listing orchestration."""

from __future__ import annotations

from typing import Any

__all__ = ["list_targets"]


def __getattr__(name: str) -> Any:
    """Lazily expose scanner APIs to avoid import cycles at package import time."""
    if name == "list_targets":
        from .orchestrator import list_targets

        return list_targets
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
