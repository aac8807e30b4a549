"""Target extraction strategies for Make and Ninja build files."""

from __future__ import annotations

from pathlib import Path

from mkpick.constants.extraction import (
    DEFAULT_MAKE_EXECUTABLE,
    DEFAULT_NINJA_EXECUTABLE,
    METHOD_DEFAULT,
    METHOD_QUERY,
    VALID_METHODS,
)
from mkpick.exceptions import ConfigError
from mkpick.types import BuildDialect, ExtractionMethod

from .base import TargetExtractor
from .make_database import MakeDatabaseExtractor, parse_make_database
from .ninja import NinjaExtractor, parse_ninja_targets
from .static import StaticMakefileExtractor, parse_makefile_text

__all__ = [
    "MakeDatabaseExtractor",
    "NinjaExtractor",
    "StaticMakefileExtractor",
    "TargetExtractor",
    "extract_targets",
    "parse_make_database",
    "parse_makefile_text",
    "parse_ninja_targets",
    "select_extractor",
]


def select_extractor(
    dialect: BuildDialect,
    method: ExtractionMethod = METHOD_DEFAULT,
    *,
    make_executable: str = DEFAULT_MAKE_EXECUTABLE,
    ninja_executable: str = DEFAULT_NINJA_EXECUTABLE,
) -> TargetExtractor:
    """Pick the extraction strategy for a dialect and configured method.

    Ninja files always go through ``ninja``; *method* only applies to Make.
    """
    if dialect is BuildDialect.NINJA:
        return NinjaExtractor(ninja_executable)
    if method not in VALID_METHODS:
        raise ConfigError(f"list_target_method must be one of {sorted(VALID_METHODS)}, got {method!r}")
    if method == METHOD_QUERY:
        return MakeDatabaseExtractor(make_executable)
    return StaticMakefileExtractor()


def extract_targets(
    path: Path,
    dialect: BuildDialect,
    method: ExtractionMethod = METHOD_DEFAULT,
    *,
    make_executable: str = DEFAULT_MAKE_EXECUTABLE,
    ninja_executable: str = DEFAULT_NINJA_EXECUTABLE,
) -> list[str]:
    """Extract the deduplicated target list of *path*."""
    extractor = select_extractor(
        dialect,
        method,
        make_executable=make_executable,
        ninja_executable=ninja_executable,
    )
    return extractor.extract(path)
