"""Core data models for mkpick."""

from .entities import TargetListing

__all__ = ["TargetListing"]
