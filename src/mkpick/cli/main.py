"""CLI entrypoint for mkpick."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from mkpick import __version__
from mkpick.command import build_command, format_command
from mkpick.config import MkpickConfig, load_config
from mkpick.constants.branding import CLI_DESCRIPTION
from mkpick.constants.config import MAX_NICENESS
from mkpick.constants.extraction import VALID_METHODS
from mkpick.constants.reporting import OUTPUT_FORMAT_TEXT, VALID_OUTPUT_FORMATS
from mkpick.exceptions import BuildFileNotFoundError, ConfigError, ExtractionError, MkpickError
from mkpick.exceptions.validation import format_errors
from mkpick.reporting import render_listings, render_location
from mkpick.scanner.cache import TargetCache
from mkpick.scanner.orchestrator import list_targets, resolve_build_file
from mkpick.validation import preflight_validate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="mkpick",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_cmd = subparsers.add_parser("list", help="List the targets of the nearest build file")
    _add_location_options(list_cmd, multiple=True)
    _add_tool_options(list_cmd)
    list_cmd.add_argument(
        "--sort",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Sort targets alphabetically (default: sort_targets from config)",
    )
    list_cmd.add_argument(
        "--cache",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Reuse targets across directories sharing a build file (default: cache_targets from config)",
    )
    list_cmd.add_argument(
        "--format",
        dest="output_format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=OUTPUT_FORMAT_TEXT,
        help="Output format: text (one target per line, default) or json",
    )

    locate = subparsers.add_parser("locate", help="Print the build file that would be used")
    _add_location_options(locate)

    command = subparsers.add_parser("command", help="Print the command that builds the given targets")
    _add_location_options(command)
    _add_tool_options(command)
    command.add_argument("targets", nargs="*", help="Targets to build (none builds the default target)")
    command.add_argument("-j", "--jobs", type=int, default=None, help="Job count (0 uses every processor)")
    command.add_argument("-n", "--niceness", type=int, default=None, help="Run the build under nice -n N")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without listing targets")
    validate.add_argument("-d", "--directory", type=Path, default=Path("."), help="Base directory")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def _add_location_options(parser: argparse.ArgumentParser, *, multiple: bool = False) -> None:
    if multiple:
        parser.add_argument(
            "-d",
            "--directory",
            dest="directories",
            type=Path,
            action="append",
            help="Base directory (default: .); repeat to list several with one shared target cache",
        )
    else:
        parser.add_argument("-d", "--directory", type=Path, default=Path("."), help="Base directory (default: .)")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("-b", "--build-dir", default=None, help="Directory searched before the base directory")
    parser.add_argument(
        "-p",
        "--project",
        action="store_true",
        help="Search from the enclosing project root and its build/ directory",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show cache and timing diagnostics")


def _add_tool_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--make", dest="make_executable", default=None, help="Make executable")
    parser.add_argument("--ninja", dest="ninja_executable", default=None, help="Ninja executable")
    parser.add_argument(
        "-m",
        "--method",
        choices=sorted(VALID_METHODS),
        default=None,
        help="Makefile target listing method: default (static scan) or qp (make database dump)",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    validation_errors = list(
        dict.fromkeys(
            error
            for directory in _base_directories(args)
            for error in preflight_validate(root=directory, config_path=args.config)
        )
    )
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    if args.command == "validate-config":
        print("Configuration is valid.")
        return 0

    try:
        if args.command == "list":
            return _handle_list(args)
        if args.command == "locate":
            return _handle_locate(args, _resolve_config(args, args.directory))
        if args.command == "command":
            return _handle_command(args, _resolve_config(args, args.directory))
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except BuildFileNotFoundError as exc:
        print(f"Build file error: {exc}", file=sys.stderr)
        return 1
    except ExtractionError as exc:
        print(f"Target extraction error ({exc.path}): {exc}", file=sys.stderr)
        return 1
    except MkpickError as exc:
        print(f"mkpick error: {exc}", file=sys.stderr)
        return 1

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _base_directories(args: argparse.Namespace) -> list[Path]:
    if args.command == "list":
        return args.directories or [Path(".")]
    return [args.directory]


def _resolve_config(args: argparse.Namespace, directory: Path) -> MkpickConfig:
    """Load the config file of *directory* and apply command-line overrides."""
    config = load_config(directory, args.config)
    overrides: dict[str, object] = {}
    if args.build_dir is not None:
        overrides["build_dir"] = args.build_dir
    for name in ("make_executable", "ninja_executable"):
        value = getattr(args, name, None)
        if value is not None:
            overrides[name] = value
    if getattr(args, "method", None) is not None:
        overrides["list_target_method"] = args.method
    if getattr(args, "sort", None) is not None:
        overrides["sort_targets"] = args.sort
    if getattr(args, "cache", None) is not None:
        overrides["cache_targets"] = args.cache
    if getattr(args, "niceness", None) is not None:
        if not 0 <= args.niceness <= MAX_NICENESS:
            raise ConfigError(f"--niceness must be between 0 and {MAX_NICENESS}")
        overrides["niceness"] = args.niceness
    return replace(config, **overrides) if overrides else config  # type: ignore[arg-type]


def _handle_list(args: argparse.Namespace) -> int:
    cache = TargetCache()
    listings = []
    for directory in _base_directories(args):
        config = _resolve_config(args, directory)
        listing = list_targets(base_dir=directory, config=config, cache=cache, project_mode=args.project)
        if not listing.targets:
            logger.warning("No targets found in %s", listing.build_file.path)
        listings.append(listing)
    print(render_listings(listings, output_format=args.output_format, verbose=args.verbose))
    return 0


def _handle_locate(args: argparse.Namespace, config: MkpickConfig) -> int:
    build_file = resolve_build_file(base_dir=args.directory, config=config, project_mode=args.project)
    print(render_location(build_file))
    return 0


def _handle_command(args: argparse.Namespace, config: MkpickConfig) -> int:
    if args.jobs is not None and args.jobs < 0:
        raise ConfigError("--jobs must be a non-negative integer")
    build_file = resolve_build_file(base_dir=args.directory, config=config, project_mode=args.project)
    argv = build_command(build_file, args.targets, config=config, jobs=args.jobs)
    print(format_command(argv))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
