"""Target extraction exceptions.

None of these are ever cached: a failed extraction leaves any previous
cache entry for the file untouched.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from pathlib import Path

from mkpick.exceptions.base import MkpickError


class ExtractionError(MkpickError):
    """Raised when targets cannot be extracted from a build file."""

    def __init__(self, message: str, *, path: Path | str) -> None:
        super().__init__(message)
        self.path = str(path)


class UnexpectedOutputFormatError(ExtractionError):
    """Raised when ``make -nqp`` output lacks the ``# Files`` section."""


class SubprocessFailureError(ExtractionError):
    """Raised when an introspection command cannot run or exits abnormally."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | str,
        command: Sequence[str],
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message, path=path)
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr

    @property
    def formatted_command(self) -> str:
        return " ".join(shlex.quote(part) for part in self.command)


class UnreadableFileError(ExtractionError):
    """Raised when a Makefile cannot be read for static extraction."""
