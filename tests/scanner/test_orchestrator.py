"""End-to-end listing tests over real build trees."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from mkpick.config import MkpickConfig
from mkpick.exceptions import BuildFileNotFoundError, ConfigError
from mkpick.scanner.cache import TargetCache
from mkpick.scanner.orchestrator import list_targets, resolve_build_file
from mkpick.types import BuildDialect


def test_scenario_a_default_strategy_unsorted(tmp_path: Path, scenario_makefile: str) -> None:
    (tmp_path / "Makefile").write_text(scenario_makefile, encoding="utf-8")

    listing = list_targets(base_dir=tmp_path, config=MkpickConfig(), cache=TargetCache())

    assert listing.targets == ("all", "build")
    assert listing.build_file.dialect is BuildDialect.MAKE
    assert listing.cache_hit is False


def test_scenario_b_sorting_enabled(tmp_path: Path, scenario_makefile: str) -> None:
    (tmp_path / "Makefile").write_text(scenario_makefile, encoding="utf-8")

    listing = list_targets(base_dir=tmp_path, config=MkpickConfig(sort_targets=True), cache=TargetCache())

    assert listing.targets == ("all", "build")


def test_scenario_c_ninja_only(tmp_path: Path, stub_ninja) -> None:  # type: ignore[no-untyped-def]
    (tmp_path / "build.ninja").write_text("", encoding="utf-8")
    stub_ninja.stdout = "build out: phony in\ncheck: phony\n"

    listing = list_targets(base_dir=tmp_path, config=MkpickConfig(), cache=TargetCache())

    assert listing.build_file.dialect is BuildDialect.NINJA
    assert listing.targets == ("build out", "check")


def test_scenario_d_no_build_file(tmp_path: Path) -> None:
    (tmp_path / "build").mkdir()

    with pytest.raises(BuildFileNotFoundError) as exc_info:
        list_targets(base_dir=tmp_path, config=MkpickConfig(build_dir="out"), cache=TargetCache())

    assert exc_info.value.base_dir == tmp_path.resolve()
    assert exc_info.value.searched == (tmp_path.resolve() / "out", tmp_path.resolve())


def test_cached_listing_reports_hit(tmp_path: Path, scenario_makefile: str) -> None:
    (tmp_path / "Makefile").write_text(scenario_makefile, encoding="utf-8")
    cache = TargetCache()
    config = MkpickConfig(cache_targets=True)

    first = list_targets(base_dir=tmp_path, config=config, cache=cache)
    second = list_targets(base_dir=tmp_path, config=config, cache=cache)

    assert first.targets == second.targets
    assert first.cache_hit is False
    assert second.cache_hit is True


def test_build_dir_takes_precedence(tmp_path: Path, write_file: Callable[[str, str], Path]) -> None:
    write_file("Makefile", "top:\n")
    write_file("out/Makefile", "generated:\n")

    listing = list_targets(base_dir=tmp_path, config=MkpickConfig(build_dir="out"), cache=TargetCache())

    assert listing.targets == ("generated",)


def test_project_mode_searches_from_project_root(tmp_path: Path, write_file: Callable[[str, str], Path]) -> None:
    (tmp_path / ".git").mkdir()
    write_file("build/Makefile", "from-build-dir:\n")
    nested = tmp_path / "src" / "deep"
    nested.mkdir(parents=True)

    build_file = resolve_build_file(base_dir=nested, config=MkpickConfig(), project_mode=True)

    assert build_file.path == (tmp_path / "build" / "Makefile").resolve()


def test_missing_base_directory_is_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Base directory"):
        resolve_build_file(base_dir=tmp_path / "missing", config=MkpickConfig())
