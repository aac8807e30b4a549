"""Configuration loading, validation, and normalization for mkpick.

This package facade re-exports all public names so that callers can use
``from mkpick.config import ...``.
"""

from __future__ import annotations

from mkpick.config.loader import load_config
from mkpick.config.model import MkpickConfig
from mkpick.config.validator import validate_config_file

__all__ = [
    "MkpickConfig",
    "load_config",
    "validate_config_file",
]
