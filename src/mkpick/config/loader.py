"""Config loading and normalization for mkpick."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import yaml

from mkpick.config.model import MkpickConfig
from mkpick.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_ARGUMENTS,
    DEFAULT_CACHE_TARGETS,
    DEFAULT_LIST_TARGET_METHOD,
    DEFAULT_MAKE,
    DEFAULT_MAKEFILE_NAMES,
    DEFAULT_NICENESS,
    DEFAULT_NINJA,
    DEFAULT_NINJA_FILENAME,
    DEFAULT_NPROC,
    DEFAULT_SORT_TARGETS,
    MAX_NICENESS,
)
from mkpick.constants.extraction import VALID_METHODS
from mkpick.exceptions import ConfigError
from mkpick.types import ExtractionMethod


def load_config(root: Path, config_path: Path | None = None) -> MkpickConfig:
    """Load and validate config from ``.mkpick.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return MkpickConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    method = raw.get("list_target_method", DEFAULT_LIST_TARGET_METHOD)
    if not isinstance(method, str) or method not in VALID_METHODS:
        raise ConfigError(f"list_target_method must be one of {sorted(VALID_METHODS)}, got {method!r}")

    nproc = _ensure_int(raw.get("nproc", DEFAULT_NPROC), "nproc")
    if nproc < 0:
        raise ConfigError("nproc must be a non-negative integer")

    niceness = _ensure_int(raw.get("niceness", DEFAULT_NICENESS), "niceness")
    if not 0 <= niceness <= MAX_NICENESS:
        raise ConfigError(f"niceness must be between 0 and {MAX_NICENESS}")

    build_dir = raw.get("build_dir")
    if build_dir is not None and not isinstance(build_dir, str):
        raise ConfigError("build_dir must be a string")

    makefile_names = tuple(
        name.strip()
        for name in _ensure_string_list(raw.get("makefile_names", list(DEFAULT_MAKEFILE_NAMES)), "makefile_names")
        if name.strip()
    )
    if not makefile_names:
        raise ConfigError("makefile_names must list at least one file name")

    return MkpickConfig(
        make_executable=_ensure_string(raw.get("make_executable", DEFAULT_MAKE), "make_executable"),
        ninja_executable=_ensure_string(raw.get("ninja_executable", DEFAULT_NINJA), "ninja_executable"),
        build_dir=build_dir or None,
        cache_targets=_ensure_bool(raw.get("cache_targets", DEFAULT_CACHE_TARGETS), "cache_targets"),
        sort_targets=_ensure_bool(raw.get("sort_targets", DEFAULT_SORT_TARGETS), "sort_targets"),
        list_target_method=cast(ExtractionMethod, method),
        nproc=nproc,
        niceness=niceness,
        arguments=_ensure_string(raw.get("arguments", DEFAULT_ARGUMENTS), "arguments", allow_empty=True),
        makefile_names=makefile_names,
        ninja_filename=_ensure_string(raw.get("ninja_filename", DEFAULT_NINJA_FILENAME), "ninja_filename"),
    )


def _ensure_string(value: Any, key_name: str, *, allow_empty: bool = False) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string")
    if allow_empty:
        return value
    if not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value.strip()


def _ensure_bool(value: Any, key_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key_name} must be a boolean")
    return value


def _ensure_int(value: Any, key_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key_name} must be an integer")
    return value


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
