"""Root exception for mkpick."""

from __future__ import annotations


class MkpickError(Exception):
    """Base class for all mkpick errors."""
