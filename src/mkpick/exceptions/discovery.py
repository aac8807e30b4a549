"""Build-file discovery exceptions."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from mkpick.exceptions.base import MkpickError


class BuildFileNotFoundError(MkpickError):
    """Raised when no Makefile or Ninja file exists in the search directories."""

    def __init__(self, base_dir: Path, searched: Sequence[Path]) -> None:
        self.base_dir = base_dir
        self.searched = tuple(searched)
        listing = ", ".join(str(path) for path in self.searched) or str(base_dir)
        super().__init__(f"No build file found (searched: {listing})")
