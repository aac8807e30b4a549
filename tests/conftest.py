"""Shared pytest fixtures for build trees and stubbed build tools."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from mkpick.io import CommandResult

SCENARIO_MAKEFILE: str = "all:\n\tfoo\n\n.PHONY: all\nbuild:\n\tbar"


@pytest.fixture()
def scenario_makefile() -> str:
    """Return a small Makefile with two targets and a .PHONY line."""
    return SCENARIO_MAKEFILE


@pytest.fixture()
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes *content* to *relative* under ``tmp_path``."""

    def _write(relative: str, content: str = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


class StubRunner:
    """Records introspection commands and answers them with canned output."""

    def __init__(self, stdout: str = "", returncode: int = 0, stderr: str = "") -> None:
        self.stdout = stdout
        self.returncode = returncode
        self.stderr = stderr
        self.calls: list[tuple[tuple[str, ...], Path, bool]] = []

    def __call__(
        self,
        command: Sequence[str],
        *,
        cwd: Path,
        source: Path,
        discard_stderr: bool = False,
    ) -> CommandResult:
        self.calls.append((tuple(command), cwd, discard_stderr))
        return CommandResult(
            command=tuple(command),
            returncode=self.returncode,
            stdout=self.stdout,
            stderr=self.stderr,
        )


@pytest.fixture()
def stub_ninja(monkeypatch: pytest.MonkeyPatch) -> StubRunner:
    """Replace the process runner used by the Ninja extractor."""
    runner = StubRunner()
    monkeypatch.setattr("mkpick.extraction.ninja.run_command", runner)
    return runner


@pytest.fixture()
def stub_make(monkeypatch: pytest.MonkeyPatch) -> StubRunner:
    """Replace the process runner used by the make database extractor."""
    runner = StubRunner()
    monkeypatch.setattr("mkpick.extraction.make_database.run_command", runner)
    return runner
