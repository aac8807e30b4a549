"""Shared exception hierarchy for mkpick."""

from __future__ import annotations

from .base import MkpickError
from .config import ConfigError
from .discovery import BuildFileNotFoundError
from .extraction import (
    ExtractionError,
    SubprocessFailureError,
    UnexpectedOutputFormatError,
    UnreadableFileError,
)

__all__ = [
    "BuildFileNotFoundError",
    "ConfigError",
    "ExtractionError",
    "MkpickError",
    "SubprocessFailureError",
    "UnexpectedOutputFormatError",
    "UnreadableFileError",
]
