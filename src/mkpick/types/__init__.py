"""Shared type aliases for mkpick."""

from .cache import CacheEntry, CacheStats
from .common import BuildDialect, ExtractionMethod, JsonObject, JsonScalar, JsonValue, OutputFormat

__all__ = [
    "BuildDialect",
    "CacheEntry",
    "CacheStats",
    "ExtractionMethod",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "OutputFormat",
]
