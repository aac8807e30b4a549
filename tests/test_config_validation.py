"""Tests for collect-all config validation."""

from __future__ import annotations

from pathlib import Path

from mkpick.config import validate_config_file
from mkpick.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005, CFG006, CFG007, CFG010
from mkpick.exceptions.validation import format_errors
from mkpick.validation import preflight_validate


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / ".mkpick.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_valid_config_has_no_errors(tmp_path: Path) -> None:
    _write(tmp_path, "cache_targets: true\nlist_target_method: qp\nnproc: 4\n")

    assert validate_config_file(tmp_path) == []


def test_missing_implicit_config_is_fine(tmp_path: Path) -> None:
    assert validate_config_file(tmp_path) == []


def test_missing_explicit_config(tmp_path: Path) -> None:
    errors = validate_config_file(tmp_path, tmp_path / "x.yaml", config_explicit=True)

    assert [e.code for e in errors] == [CFG001]


def test_invalid_yaml_and_non_mapping(tmp_path: Path) -> None:
    _write(tmp_path, "a: [\n")
    assert [e.code for e in validate_config_file(tmp_path)] == [CFG002]

    _write(tmp_path, "- 1\n")
    assert [e.code for e in validate_config_file(tmp_path)] == [CFG003]


def test_unknown_key_suggests_close_match(tmp_path: Path) -> None:
    _write(tmp_path, "sort_target: true\n")

    errors = validate_config_file(tmp_path)

    assert len(errors) == 1
    assert errors[0].code == CFG004
    assert "sort_targets" in errors[0].hint


def test_collects_every_problem(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "cache_targets: maybe\nlist_target_method: regex\nniceness: 99\nnproc: two\nmakefile_names: 7\n",
    )

    codes = sorted(e.code for e in validate_config_file(tmp_path))

    assert codes == [CFG005, CFG005, CFG005, CFG006, CFG007]


def test_format_errors_is_sorted_and_readable(tmp_path: Path) -> None:
    _write(tmp_path, "niceness: 99\nbogus: 1\n")

    rendered = format_errors(validate_config_file(tmp_path))

    lines = rendered.splitlines()
    assert lines[0].startswith(f"[{CFG004}]")
    assert lines[1].startswith(f"[{CFG007}]")


def test_preflight_reports_missing_base_directory(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path / "missing")

    assert [e.code for e in errors] == [CFG010]
