"""Build command construction for chosen targets.

Commands are only assembled and rendered here; running them is left to
the caller.
"""

from __future__ import annotations

import os
import shlex
from collections.abc import Sequence

from mkpick.config import MkpickConfig
from mkpick.constants.config import NICE_EXECUTABLE
from mkpick.constants.discovery import MAKEFILE_NAMES, NINJA_FILENAME
from mkpick.exceptions import ConfigError
from mkpick.scanner.discovery import BuildFile
from mkpick.types import BuildDialect


def resolve_jobs(nproc: int) -> int:
    """Return the job count, with ``0`` meaning every available processor."""
    if nproc == 0:
        return os.cpu_count() or 1
    return nproc


def build_command(
    build_file: BuildFile,
    targets: Sequence[str],
    *,
    config: MkpickConfig,
    jobs: int | None = None,
) -> list[str]:
    """Return the argv that builds *targets* from *build_file*.

    The tool is switched into the build file's directory with ``-C``. An
    empty *targets* sequence builds the default target.
    """
    job_count = resolve_jobs(config.nproc if jobs is None else jobs)
    argv: list[str] = []
    if config.niceness > 0:
        argv.extend([NICE_EXECUTABLE, "-n", str(config.niceness)])

    executable = config.ninja_executable if build_file.dialect is BuildDialect.NINJA else config.make_executable
    argv.extend([executable, "-C", str(build_file.directory)])
    if not _found_by_default(build_file):
        argv.extend(["-f", build_file.path.name])
    argv.extend(_format_arguments(config.arguments, job_count))
    argv.extend(targets)
    return argv


def format_command(argv: Sequence[str]) -> str:
    """Render *argv* as a copy-pasteable shell command."""
    return " ".join(shlex.quote(part) for part in argv)


def _format_arguments(template: str, jobs: int) -> list[str]:
    if not template.strip():
        return []
    try:
        rendered = template % jobs if "%" in template else template
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"arguments template {template!r} is invalid: {exc}") from exc
    return shlex.split(rendered)


def _found_by_default(build_file: BuildFile) -> bool:
    """Return True when the tool reads *build_file* without ``-f``."""
    if build_file.dialect is BuildDialect.NINJA:
        return build_file.path.name == NINJA_FILENAME
    return build_file.path.name in MAKEFILE_NAMES
