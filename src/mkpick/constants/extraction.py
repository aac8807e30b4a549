"""Constants for target extraction from Makefiles and Ninja files."""

from __future__ import annotations

import re
from re import Pattern

from mkpick.types.common import ExtractionMethod

METHOD_DEFAULT: ExtractionMethod = "default"
METHOD_QUERY: ExtractionMethod = "qp"
VALID_METHODS: frozenset[str] = frozenset({METHOD_DEFAULT, METHOD_QUERY})

# Static scan of the Makefile text.
STATIC_TARGET_PATTERN: Pattern[str] = re.compile(r"^([^: \n]+?):", re.MULTILINE)

# ``make -nqp`` database dump.
MAKE_DATABASE_FILES_MARKER: Pattern[str] = re.compile(r"^# Files", re.MULTILINE)
MAKE_DATABASE_TARGET_PATTERN: Pattern[str] = re.compile(r"^([^%$:#\n\t ]+):(?!=)")
MAKE_DATABASE_NOT_A_TARGET: str = "# Not a target:"
DOTFILE_TARGET_PATTERN: Pattern[str] = re.compile(r"^([/a-zA-Z0-9_. -]+/)?\.")
MAKE_COMPLETION_VARIABLE: str = "__BASH_MAKE_COMPLETION__=1"
# Goal given to the dump so no real target is considered.
MAKE_DATABASE_GOAL: str = ".DEFAULT"

# ``ninja -t targets all`` lines: ``<name>: <rule>``.
NINJA_TARGET_PATTERN: Pattern[str] = re.compile(r"^([^:\n]+): \S")
NINJA_TARGETS_TOOL_ARGS: tuple[str, ...] = ("-t", "targets", "all")

DEFAULT_MAKE_EXECUTABLE: str = "make"
DEFAULT_NINJA_EXECUTABLE: str = "ninja"
