"""Tests for build-file lookup order and dialect detection."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from mkpick.command import build_command
from mkpick.config import MkpickConfig
from mkpick.scanner.discovery import (
    build_dialect_for,
    candidate_paths,
    find_project_root,
    locate_build_file,
    search_directories,
)
from mkpick.types import BuildDialect


def test_makefile_preferred_over_ninja(tmp_path: Path, write_file: Callable[[str, str], Path]) -> None:
    write_file("Makefile", "all:\n")
    write_file("build.ninja", "")

    located = locate_build_file(tmp_path)

    assert located is not None
    assert located.path == tmp_path / "Makefile"
    assert located.dialect is BuildDialect.MAKE


def test_only_ninja_file_is_ninja_dialect(tmp_path: Path, write_file: Callable[[str, str], Path]) -> None:
    write_file("build.ninja", "")

    located = locate_build_file(tmp_path)

    assert located is not None
    assert located.dialect is BuildDialect.NINJA
    assert located.path.name == "build.ninja"


def test_returns_none_when_nothing_exists(tmp_path: Path) -> None:
    (tmp_path / "build").mkdir()

    assert locate_build_file(tmp_path, ("out", "", "build")) is None


@pytest.mark.parametrize("name", ["Makefile", "makefile", "GNUmakefile"])
def test_each_makefile_name_is_recognised(tmp_path: Path, write_file: Callable[[str, str], Path], name: str) -> None:
    write_file(name, "")

    located = locate_build_file(tmp_path)

    assert located is not None
    assert located.path.name == name
    assert located.dialect is BuildDialect.MAKE


def test_directories_tried_in_caller_order(tmp_path: Path, write_file: Callable[[str, str], Path]) -> None:
    write_file("Makefile", "")
    write_file("out/build.ninja", "")

    located = locate_build_file(tmp_path, ("out", ""))

    assert located is not None
    assert located.path == tmp_path / "out" / "build.ninja"
    assert located.dialect is BuildDialect.NINJA


def test_build_subdirectory_found_last(tmp_path: Path, write_file: Callable[[str, str], Path]) -> None:
    write_file("build/build.ninja", "")

    located = locate_build_file(tmp_path, ("", "build"))

    assert located is not None
    assert located.path.parent.name == "build"


def test_empty_directory_list_means_base_directory(tmp_path: Path, write_file: Callable[[str, str], Path]) -> None:
    write_file("Makefile", "")

    located = locate_build_file(tmp_path, ())

    assert located is not None
    assert located.path.name == "Makefile"


def test_directory_named_like_makefile_is_skipped(tmp_path: Path, write_file: Callable[[str, str], Path]) -> None:
    (tmp_path / "Makefile").mkdir()
    write_file("build.ninja", "")

    located = locate_build_file(tmp_path)

    assert located is not None
    assert located.dialect is BuildDialect.NINJA


def test_custom_makefile_names(tmp_path: Path, write_file: Callable[[str, str], Path]) -> None:
    write_file("Makefile", "")
    write_file("Makefile.dev", "")

    located = locate_build_file(tmp_path, makefile_names=("Makefile.dev",))

    assert located is not None
    assert located.path.name == "Makefile.dev"


def test_symlinked_ninja_file_keeps_ninja_dialect(tmp_path: Path, write_file: Callable[[str, str], Path]) -> None:
    write_file("rules.ninja", "")
    (tmp_path / "build.ninja").symlink_to("rules.ninja")

    located = locate_build_file(tmp_path)

    assert located is not None
    assert located.path == tmp_path / "build.ninja"
    assert located.dialect is BuildDialect.NINJA


def test_symlinked_makefile_keeps_its_own_directory(tmp_path: Path, write_file: Callable[[str, str], Path]) -> None:
    write_file("shared/common.mk", "all:\n")
    work = tmp_path / "work"
    work.mkdir()
    (work / "Makefile").symlink_to(Path("..") / "shared" / "common.mk")

    located = locate_build_file(work)

    assert located is not None
    assert located.path == work / "Makefile"
    assert located.directory == work
    assert located.dialect is BuildDialect.MAKE
    assert build_command(located, ["all"], config=MkpickConfig()) == ["make", "-C", str(work), "-j1", "all"]


def test_candidate_order_is_directory_major(tmp_path: Path) -> None:
    candidates = candidate_paths(tmp_path, ("a", ""))

    assert [path.relative_to(tmp_path).as_posix() for path in candidates] == [
        "a/Makefile",
        "a/makefile",
        "a/GNUmakefile",
        "a/build.ninja",
        "Makefile",
        "makefile",
        "GNUmakefile",
        "build.ninja",
    ]


def test_dialect_follows_file_name() -> None:
    assert build_dialect_for(Path("/x/out/build.ninja")) is BuildDialect.NINJA
    assert build_dialect_for(Path("/x/GNUmakefile")) is BuildDialect.MAKE


@pytest.mark.parametrize(
    ("build_dir", "project_mode", "expected"),
    [
        (None, False, ("",)),
        ("out", False, ("out", "")),
        (None, True, ("", "build")),
        ("out", True, ("out", "", "build")),
        ("build", True, ("build", "")),
    ],
)
def test_search_directories(build_dir: str | None, project_mode: bool, expected: tuple[str, ...]) -> None:
    assert search_directories(build_dir, project_mode=project_mode) == expected


def test_find_project_root_walks_upward(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    nested = tmp_path / "src" / "lib"
    nested.mkdir(parents=True)

    assert find_project_root(nested) == tmp_path.resolve()


def test_find_project_root_without_marker(tmp_path: Path) -> None:
    nested = tmp_path / "a"
    nested.mkdir()

    assert find_project_root(nested, markers=(".mkpick-test-marker",)) is None
