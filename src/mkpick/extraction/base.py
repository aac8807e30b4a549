"""Target extractor interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class TargetExtractor(ABC):
    """Extract invocable target names from a build-description file."""

    @abstractmethod
    def extract(self, path: Path) -> list[str]:
        """Return the deduplicated targets declared by *path*.

        Raises:
            ExtractionError: If the file cannot be read or the build tool
                fails or prints output in an unexpected format.
        """
