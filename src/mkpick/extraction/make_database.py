"""Target extraction from ``make``'s internal database dump.

``make -nqp`` evaluates the Makefile, including ``$(shell ...)`` calls and
included files, and prints every rule it knows about. The dump is scanned
from the ``# Files`` section onward.
"""

from __future__ import annotations

import logging
from pathlib import Path

from mkpick.constants.extraction import (
    DEFAULT_MAKE_EXECUTABLE,
    DOTFILE_TARGET_PATTERN,
    MAKE_COMPLETION_VARIABLE,
    MAKE_DATABASE_FILES_MARKER,
    MAKE_DATABASE_GOAL,
    MAKE_DATABASE_NOT_A_TARGET,
    MAKE_DATABASE_TARGET_PATTERN,
)
from mkpick.exceptions import UnexpectedOutputFormatError
from mkpick.extraction.base import TargetExtractor
from mkpick.io import run_command
from mkpick.utils import unique_in_order

logger = logging.getLogger(__name__)


def parse_make_database(output: str, *, path: Path | str = "<make>") -> list[str]:
    """Return the targets listed in a ``make -nqp`` database dump.

    Raises:
        UnexpectedOutputFormatError: If the dump has no ``# Files`` section.
    """
    marker = MAKE_DATABASE_FILES_MARKER.search(output)
    if marker is None:
        raise UnexpectedOutputFormatError(
            "Unexpected make database output: no '# Files' section",
            path=path,
        )

    targets: list[str] = []
    previous = ""
    for line in output[marker.start() :].splitlines():
        match = MAKE_DATABASE_TARGET_PATTERN.match(line)
        if match is not None:
            name = match.group(1)
            if not previous.startswith(MAKE_DATABASE_NOT_A_TARGET) and not DOTFILE_TARGET_PATTERN.match(name):
                targets.append(name)
        previous = line
    return unique_in_order(targets)


class MakeDatabaseExtractor(TargetExtractor):
    """Ask ``make`` for its rule database in no-execution query mode.

    WARNING: ``make -nqp`` still expands ``$(shell ...)`` while parsing.
    Only use with trusted Makefiles.
    """

    def __init__(self, make_executable: str = DEFAULT_MAKE_EXECUTABLE) -> None:
        self.make_executable = make_executable

    def command(self, path: Path) -> list[str]:
        return [self.make_executable, "-nqp", MAKE_COMPLETION_VARIABLE, "-f", str(path), MAKE_DATABASE_GOAL]

    def extract(self, path: Path) -> list[str]:
        # ``make -q`` exits 1 when targets are out of date; only the dump matters.
        result = run_command(self.command(path), cwd=path.parent, source=path, discard_stderr=True)
        logger.debug("make database dump: %d bytes (exit %d)", len(result.stdout), result.returncode)
        return parse_make_database(result.stdout, path=path)
