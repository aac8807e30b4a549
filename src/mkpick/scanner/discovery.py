"""Build-file discovery and project-root helpers."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from mkpick.constants.discovery import (
    BASE_DIRECTORY,
    CONVENTIONAL_BUILD_DIRECTORY,
    MAKEFILE_NAMES,
    NINJA_FILENAME,
    PROJECT_ROOT_MARKERS,
)
from mkpick.types import BuildDialect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildFile:
    """A located build-description file and the dialect it implies."""

    path: Path
    dialect: BuildDialect

    @property
    def directory(self) -> Path:
        return self.path.parent


def candidate_paths(
    base_dir: Path,
    extra_dirs: Sequence[str | Path] = (BASE_DIRECTORY,),
    *,
    makefile_names: Sequence[str] = MAKEFILE_NAMES,
    ninja_filename: str = NINJA_FILENAME,
) -> list[Path]:
    """Return every candidate build file in lookup priority order.

    Directories are tried in the order given; within a directory the
    Makefile names come before the Ninja file name.
    """
    directories = list(extra_dirs) or [BASE_DIRECTORY]
    names = (*makefile_names, ninja_filename)
    return [base_dir / str(directory) / name for directory in directories for name in names]


def locate_build_file(
    base_dir: Path,
    extra_dirs: Sequence[str | Path] = (BASE_DIRECTORY,),
    *,
    makefile_names: Sequence[str] = MAKEFILE_NAMES,
    ninja_filename: str = NINJA_FILENAME,
) -> BuildFile | None:
    """Find the first existing build file under *base_dir*, or ``None``."""
    for candidate in candidate_paths(
        base_dir,
        extra_dirs,
        makefile_names=makefile_names,
        ninja_filename=ninja_filename,
    ):
        if not candidate.is_file():
            continue
        # Symlinks stay unresolved: the name found decides dialect and directory.
        located = candidate.absolute()
        dialect = build_dialect_for(located, ninja_filename=ninja_filename)
        logger.debug("Located %s build file: %s", dialect.value, located)
        return BuildFile(path=located, dialect=dialect)

    logger.debug("No build file under %s (dirs=%s)", base_dir, list(extra_dirs))
    return None


def build_dialect_for(path: Path, *, ninja_filename: str = NINJA_FILENAME) -> BuildDialect:
    """Return NINJA when *path* names a Ninja file, MAKE otherwise."""
    if str(path).endswith(ninja_filename):
        return BuildDialect.NINJA
    return BuildDialect.MAKE


def search_directories(build_dir: str | None = None, *, project_mode: bool = False) -> tuple[str, ...]:
    """Return the conventional directory search order.

    The configured build directory wins, then the base directory itself.
    Project mode also tries the conventional ``build`` subdirectory.
    """
    directories: list[str] = []
    if build_dir:
        directories.append(build_dir)
    directories.append(BASE_DIRECTORY)
    if project_mode:
        directories.append(CONVENTIONAL_BUILD_DIRECTORY)
    return tuple(dict.fromkeys(directories))


def find_project_root(start: Path, markers: Sequence[str] = PROJECT_ROOT_MARKERS) -> Path | None:
    """Walk upward from *start* to the first directory holding a project marker."""
    current = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        if any((directory / marker).exists() for marker in markers):
            return directory
    return None
