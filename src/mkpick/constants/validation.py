"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value
CFG007: str = "CFG007"  # value out of range
CFG010: str = "CFG010"  # base directory not found

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "make_executable",
        "ninja_executable",
        "build_dir",
        "cache_targets",
        "sort_targets",
        "list_target_method",
        "nproc",
        "niceness",
        "arguments",
        "makefile_names",
        "ninja_filename",
    }
)

STRING_KEYS: frozenset[str] = frozenset({"make_executable", "ninja_executable", "arguments", "ninja_filename"})
BOOL_KEYS: frozenset[str] = frozenset({"cache_targets", "sort_targets"})
LIST_OF_STRINGS_KEYS: frozenset[str] = frozenset({"makefile_names"})
