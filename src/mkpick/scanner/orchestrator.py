"""End-to-end target listing for a base directory.

``list_targets`` ties the locator, the target cache, and the configuration
together; it is the entry point used by the CLI.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from mkpick.config import MkpickConfig
from mkpick.exceptions import BuildFileNotFoundError, ConfigError
from mkpick.model import TargetListing
from mkpick.scanner.cache import TargetCache
from mkpick.scanner.discovery import BuildFile, find_project_root, locate_build_file, search_directories

logger = logging.getLogger(__name__)


def resolve_build_file(
    *,
    base_dir: Path,
    config: MkpickConfig,
    project_mode: bool = False,
) -> BuildFile:
    """Locate the build file for *base_dir*, raising when there is none.

    In project mode the search starts from the enclosing project root
    (the nearest directory holding a VCS marker) instead of *base_dir*.
    """
    base_dir = base_dir.resolve()
    if not base_dir.is_dir():
        raise ConfigError(f"Base directory does not exist or is not a directory: {base_dir}")

    if project_mode:
        project_root = find_project_root(base_dir)
        if project_root is None:
            logger.warning("No project root above %s; searching it directly", base_dir)
        else:
            base_dir = project_root

    directories = search_directories(config.build_dir, project_mode=project_mode)
    build_file = locate_build_file(
        base_dir,
        directories,
        makefile_names=config.makefile_names,
        ninja_filename=config.ninja_filename,
    )
    if build_file is None:
        raise BuildFileNotFoundError(base_dir, [base_dir / directory for directory in directories])

    logger.info("Using %s (%s)", build_file.path, build_file.dialect.value)
    return build_file


def list_targets(
    *,
    base_dir: Path,
    config: MkpickConfig,
    cache: TargetCache,
    project_mode: bool = False,
) -> TargetListing:
    """Locate the build file under *base_dir* and return its targets."""
    started_at = time.perf_counter()
    build_file = resolve_build_file(base_dir=base_dir, config=config, project_mode=project_mode)

    hits_before = cache.stats.hits
    targets = cache.get_targets(
        build_file,
        caching_enabled=config.cache_targets,
        sort_enabled=config.sort_targets,
        method=config.list_target_method,
        make_executable=config.make_executable,
        ninja_executable=config.ninja_executable,
    )
    elapsed_ms = (time.perf_counter() - started_at) * 1000
    cache_hit = cache.stats.hits > hits_before
    logger.debug(
        "Listed %d targets from %s in %.1f ms (cache %s)",
        len(targets),
        build_file.path,
        elapsed_ms,
        "hit" if cache_hit else "miss",
    )
    return TargetListing(
        build_file=build_file,
        targets=tuple(targets),
        cache_hit=cache_hit,
        elapsed_ms=elapsed_ms,
    )
