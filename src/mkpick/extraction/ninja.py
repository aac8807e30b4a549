"""Target extraction through ``ninja -t targets all``."""

from __future__ import annotations

from pathlib import Path

from mkpick.constants.extraction import (
    DEFAULT_NINJA_EXECUTABLE,
    NINJA_TARGET_PATTERN,
    NINJA_TARGETS_TOOL_ARGS,
)
from mkpick.exceptions import SubprocessFailureError
from mkpick.extraction.base import TargetExtractor
from mkpick.io import run_command
from mkpick.utils import unique_in_order


def parse_ninja_targets(output: str) -> list[str]:
    """Return ``<name>`` from every ``<name>: <rule>`` line of *output*."""
    names = (NINJA_TARGET_PATTERN.match(line) for line in output.splitlines())
    return unique_in_order(match.group(1) for match in names if match is not None)


class NinjaExtractor(TargetExtractor):
    """List every target Ninja knows about for a ``build.ninja`` file."""

    def __init__(self, ninja_executable: str = DEFAULT_NINJA_EXECUTABLE) -> None:
        self.ninja_executable = ninja_executable

    def command(self, path: Path) -> list[str]:
        return [self.ninja_executable, "-f", str(path), *NINJA_TARGETS_TOOL_ARGS]

    def extract(self, path: Path) -> list[str]:
        command = self.command(path)
        result = run_command(command, cwd=path.parent, source=path)
        if result.returncode != 0:
            raise SubprocessFailureError(
                f"{self.ninja_executable} exited with code {result.returncode}: {result.stderr.strip()}",
                path=path,
                command=command,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return parse_ninja_targets(result.stdout)
