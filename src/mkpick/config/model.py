"""Config data model for mkpick."""

from __future__ import annotations

from dataclasses import dataclass

from mkpick.constants.config import (
    DEFAULT_ARGUMENTS,
    DEFAULT_CACHE_TARGETS,
    DEFAULT_LIST_TARGET_METHOD,
    DEFAULT_MAKE,
    DEFAULT_MAKEFILE_NAMES,
    DEFAULT_NICENESS,
    DEFAULT_NINJA,
    DEFAULT_NINJA_FILENAME,
    DEFAULT_NPROC,
    DEFAULT_SORT_TARGETS,
)
from mkpick.types import ExtractionMethod


@dataclass(frozen=True)
class MkpickConfig:
    """Resolved mkpick config."""

    make_executable: str = DEFAULT_MAKE
    ninja_executable: str = DEFAULT_NINJA
    build_dir: str | None = None
    cache_targets: bool = DEFAULT_CACHE_TARGETS
    sort_targets: bool = DEFAULT_SORT_TARGETS
    list_target_method: ExtractionMethod = DEFAULT_LIST_TARGET_METHOD
    nproc: int = DEFAULT_NPROC
    niceness: int = DEFAULT_NICENESS
    arguments: str = DEFAULT_ARGUMENTS
    makefile_names: tuple[str, ...] = DEFAULT_MAKEFILE_NAMES
    ninja_filename: str = DEFAULT_NINJA_FILENAME
