"""Typed cache entry structures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheEntry:
    """Target list extracted from a build file at a given modification time."""

    targets: tuple[str, ...]
    modtime: int | None
    sorted: bool = False


@dataclass
class CacheStats:
    """Hit/miss counters for a target cache."""

    hits: int = 0
    misses: int = 0
