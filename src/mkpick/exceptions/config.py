"""Configuration-related exceptions."""

from __future__ import annotations

from mkpick.exceptions.base import MkpickError


class ConfigError(MkpickError, ValueError):
    """Raised when mkpick configuration is invalid."""
