"""Config file validation for mkpick."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from mkpick.constants.config import CONFIG_FILENAME, MAX_NICENESS
from mkpick.constants.extraction import VALID_METHODS
from mkpick.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    BOOL_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    LIST_OF_STRINGS_KEYS,
    STRING_KEYS,
)
from mkpick.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a ``.mkpick.yaml`` file and return all validation errors.

    This is the collect-all counterpart of ``load_config``: it never raises,
    every problem is returned as a :class:`ValidationError`.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    for key in sorted(STRING_KEYS):
        if key in raw and not isinstance(raw[key], str):
            errors.append(_type_error(path_str, key, "expected a string"))

    for key in sorted(BOOL_KEYS):
        if key in raw and not isinstance(raw[key], bool):
            errors.append(_type_error(path_str, key, "expected a boolean"))

    for key in sorted(LIST_OF_STRINGS_KEYS):
        if key in raw:
            val = raw[key]
            if not isinstance(val, (list, tuple)) or not all(isinstance(i, str) for i in val):
                errors.append(_type_error(path_str, key, "expected a list of strings"))

    if "build_dir" in raw and raw["build_dir"] is not None and not isinstance(raw["build_dir"], str):
        errors.append(_type_error(path_str, "build_dir", "expected a string or null"))

    if "list_target_method" in raw:
        val = raw["list_target_method"]
        if not isinstance(val, str) or val not in VALID_METHODS:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field="list_target_method",
                    message="invalid value for `list_target_method`",
                    hint=f"expected one of: {', '.join(sorted(VALID_METHODS))}; got: {val!r}",
                )
            )

    _validate_int_range(raw, path_str, errors, key="nproc", minimum=0, maximum=None)
    _validate_int_range(raw, path_str, errors, key="niceness", minimum=0, maximum=MAX_NICENESS)

    return errors


def _type_error(path_str: str, key: str, hint: str) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=key,
        message=f"invalid type for `{key}`",
        hint=hint,
    )


def _validate_int_range(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
    *,
    key: str,
    minimum: int,
    maximum: int | None,
) -> None:
    if key not in raw:
        return
    val = raw[key]
    if isinstance(val, bool) or not isinstance(val, int):
        errors.append(_type_error(path_str, key, "expected an integer"))
        return
    if val < minimum or (maximum is not None and val > maximum):
        bounds = f">= {minimum}" if maximum is None else f"between {minimum} and {maximum}"
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field=key,
                message=f"`{key}` must be {bounds}, got {val}",
            )
        )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
