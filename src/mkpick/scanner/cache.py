"""In-process target cache keyed by build-file path and modification time.

Entries live for the lifetime of the owning :class:`TargetCache` object and
are never written to disk. An entry is only served while the file's
``st_mtime_ns`` still equals the one recorded at extraction time.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path

from mkpick.constants.extraction import (
    DEFAULT_MAKE_EXECUTABLE,
    DEFAULT_NINJA_EXECUTABLE,
    METHOD_DEFAULT,
)
from mkpick.extraction import TargetExtractor, select_extractor
from mkpick.scanner.discovery import BuildFile
from mkpick.types import CacheEntry, CacheStats, ExtractionMethod
from mkpick.utils import unique_in_order

logger = logging.getLogger(__name__)

type ExtractorFactory = Callable[..., TargetExtractor]


def file_modtime(path: Path) -> int | None:
    """Return the modification time of *path* in nanoseconds, or ``None``."""
    try:
        return path.stat().st_mtime_ns
    except OSError as exc:
        logger.warning("Cannot stat %s: %s", path, exc)
        return None


class TargetCache:
    """Serve target lists, re-extracting only when a build file changes."""

    def __init__(self, extractor_factory: ExtractorFactory = select_extractor) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._extractor_factory = extractor_factory
        self._lock = threading.Lock()
        self.stats = CacheStats()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: object) -> bool:
        return str(path) in self._entries

    def entry(self, path: Path | str) -> CacheEntry | None:
        """Return the stored entry for *path* without validating it."""
        return self._entries.get(str(path))

    def reset(self) -> None:
        """Drop every cached entry."""
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
        logger.debug("Target cache reset (%d entries dropped)", dropped)

    def get_targets(
        self,
        build_file: BuildFile,
        *,
        caching_enabled: bool,
        sort_enabled: bool,
        method: ExtractionMethod = METHOD_DEFAULT,
        make_executable: str = DEFAULT_MAKE_EXECUTABLE,
        ninja_executable: str = DEFAULT_NINJA_EXECUTABLE,
    ) -> list[str]:
        """Return the targets of *build_file*, from the cache when still valid.

        Sorting and caching are independent: with caching disabled every call
        extracts afresh and sorts again when asked to. Extraction errors
        propagate and leave any existing entry untouched.
        """
        key = str(build_file.path)
        with self._lock:
            modtime = file_modtime(build_file.path)
            entry = self._entries.get(key)
            hit = (
                caching_enabled
                and entry is not None
                and entry.modtime == modtime
                and bool(entry.targets)
            )

            if hit and entry is not None:
                self.stats.hits += 1
                logger.debug("Target cache hit: %s", key)
                targets = list(entry.targets)
                is_sorted = entry.sorted
            else:
                self.stats.misses += 1
                logger.debug("Target cache miss: %s", key)
                targets = self._extract(
                    build_file,
                    method=method,
                    make_executable=make_executable,
                    ninja_executable=ninja_executable,
                )
                is_sorted = False

            if sort_enabled:
                if not is_sorted:
                    targets.sort()
                is_sorted = True

            if caching_enabled:
                self._entries[key] = CacheEntry(targets=tuple(targets), modtime=modtime, sorted=is_sorted)

        return targets

    def _extract(
        self,
        build_file: BuildFile,
        *,
        method: ExtractionMethod,
        make_executable: str,
        ninja_executable: str,
    ) -> list[str]:
        extractor = self._extractor_factory(
            build_file.dialect,
            method,
            make_executable=make_executable,
            ninja_executable=ninja_executable,
        )
        return unique_in_order(extractor.extract(build_file.path))

