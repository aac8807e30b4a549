"""Configuration defaults and filenames."""

from __future__ import annotations

from mkpick.constants.discovery import MAKEFILE_NAMES, NINJA_FILENAME
from mkpick.constants.extraction import (
    DEFAULT_MAKE_EXECUTABLE,
    DEFAULT_NINJA_EXECUTABLE,
    METHOD_DEFAULT,
)
from mkpick.types.common import ExtractionMethod

CONFIG_FILENAME: str = ".mkpick.yaml"

DEFAULT_CACHE_TARGETS: bool = False
DEFAULT_SORT_TARGETS: bool = False
DEFAULT_LIST_TARGET_METHOD: ExtractionMethod = METHOD_DEFAULT
DEFAULT_NPROC: int = 1
DEFAULT_NICENESS: int = 0
MAX_NICENESS: int = 19
DEFAULT_ARGUMENTS: str = "-j%d"

DEFAULT_MAKE: str = DEFAULT_MAKE_EXECUTABLE
DEFAULT_NINJA: str = DEFAULT_NINJA_EXECUTABLE
DEFAULT_MAKEFILE_NAMES: tuple[str, ...] = MAKEFILE_NAMES
DEFAULT_NINJA_FILENAME: str = NINJA_FILENAME

NICE_EXECUTABLE: str = "nice"
