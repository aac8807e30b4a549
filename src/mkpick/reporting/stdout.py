"""Stdout rendering for target listings."""

from __future__ import annotations

import json
from collections.abc import Sequence

from mkpick.constants.reporting import OUTPUT_FORMAT_JSON
from mkpick.model import TargetListing
from mkpick.scanner.discovery import BuildFile
from mkpick.types import OutputFormat


def render_listing(listing: TargetListing, *, output_format: OutputFormat, verbose: bool = False) -> str:
    """Render *listing* as one target per line, or as a JSON document."""
    if output_format == OUTPUT_FORMAT_JSON:
        return json.dumps(listing.to_dict(), indent=2)

    lines = list(listing.targets)
    if verbose:
        source = "cache" if listing.cache_hit else "extracted"
        lines.append(
            f"# {len(listing.targets)} targets from {listing.build_file.path} "
            f"({listing.build_file.dialect.value}, {source}, {listing.elapsed_ms:.1f} ms)"
        )
    return "\n".join(lines)


def render_listings(
    listings: Sequence[TargetListing], *, output_format: OutputFormat, verbose: bool = False
) -> str:
    """Render the listings of several base directories.

    A single listing renders exactly like :func:`render_listing`. Several
    listings become a JSON array, or consecutive text blocks.
    """
    if len(listings) == 1:
        return render_listing(listings[0], output_format=output_format, verbose=verbose)
    if output_format == OUTPUT_FORMAT_JSON:
        return json.dumps([listing.to_dict() for listing in listings], indent=2)
    blocks = (render_listing(listing, output_format=output_format, verbose=verbose) for listing in listings)
    return "\n".join(block for block in blocks if block)


def render_location(build_file: BuildFile) -> str:
    return f"{build_file.path}\t{build_file.dialect.value}"
