"""Preflight validation shared by ``mkpick validate-config`` and the other commands."""

from __future__ import annotations

from pathlib import Path

from mkpick.config import validate_config_file
from mkpick.constants.validation import CFG010
from mkpick.exceptions.validation import ValidationError, sort_errors


def preflight_validate(root: Path, config_path: Path | None = None) -> list[ValidationError]:
    """Run all preflight validation checks and return errors in deterministic order.

    Returns an empty list when everything is valid.
    """
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        return [
            ValidationError(
                code=CFG010,
                path=str(resolved_root),
                field="",
                message=f"base directory does not exist: {resolved_root}",
            )
        ]

    errors = validate_config_file(root, config_path, config_explicit=config_path is not None)
    return sort_errors(errors)
