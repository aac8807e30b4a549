"""Blocking subprocess execution for build-tool introspection commands."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from mkpick.exceptions import SubprocessFailureError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Represents the outcome of an executed command."""

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str = ""


def run_command(
    command: Sequence[str],
    *,
    cwd: Path,
    source: Path,
    discard_stderr: bool = False,
) -> CommandResult:
    """Run *command* in *cwd* and capture its text output.

    There is no timeout: the call blocks until the tool exits. A tool that
    cannot be started raises :class:`SubprocessFailureError` naming *source*,
    the build file being inspected. Exit status is left to the caller.
    """
    logger.debug("Running %s (cwd=%s)", " ".join(shlex.quote(part) for part in command), cwd)
    try:
        process = subprocess.run(
            list(command),
            cwd=str(cwd),
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL if discard_stderr else subprocess.PIPE,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise SubprocessFailureError(
            f"Failed to run {command[0]}: {exc}",
            path=source,
            command=command,
        ) from exc

    return CommandResult(
        command=tuple(command),
        returncode=process.returncode,
        stdout=process.stdout or "",
        stderr=process.stderr or "",
    )
