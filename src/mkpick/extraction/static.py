"""Regex-based Makefile target extraction.

Reads the Makefile text directly and never runs ``make``, so included
files, variables, and generated rules are not seen.
"""

from __future__ import annotations

from pathlib import Path

from mkpick.constants.extraction import STATIC_TARGET_PATTERN
from mkpick.exceptions import UnreadableFileError
from mkpick.extraction.base import TargetExtractor
from mkpick.utils import unique_in_order


def parse_makefile_text(text: str) -> list[str]:
    """Return targets declared at line start in *text*, in file order."""
    names = (match.group(1) for match in STATIC_TARGET_PATTERN.finditer(text))
    return unique_in_order(name for name in names if not name.startswith("."))


class StaticMakefileExtractor(TargetExtractor):
    """Scan ``name:`` lines of a Makefile, skipping dot-prefixed targets."""

    def extract(self, path: Path) -> list[str]:
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise UnreadableFileError(f"Cannot read Makefile: {exc}", path=path) from exc
        return parse_makefile_text(text)
