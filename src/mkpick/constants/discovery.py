"""Constants for build-file discovery."""

from __future__ import annotations

MAKEFILE_NAMES: tuple[str, ...] = ("Makefile", "makefile", "GNUmakefile")
NINJA_FILENAME: str = "build.ninja"

BASE_DIRECTORY: str = ""
CONVENTIONAL_BUILD_DIRECTORY: str = "build"

PROJECT_ROOT_MARKERS: tuple[str, ...] = (".git", ".hg", ".svn", ".bzr", ".projectile")
