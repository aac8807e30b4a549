"""Core data models for mkpick."""

from __future__ import annotations

from dataclasses import dataclass

from mkpick.constants.reporting import SCHEMA_VERSION
from mkpick.scanner.discovery import BuildFile
from mkpick.types import JsonObject


@dataclass(frozen=True)
class TargetListing:
    """Targets resolved for one build file."""

    build_file: BuildFile
    targets: tuple[str, ...]
    cache_hit: bool
    elapsed_ms: float

    def to_dict(self) -> JsonObject:
        return {
            "schema_version": SCHEMA_VERSION,
            "build_file": str(self.build_file.path),
            "directory": str(self.build_file.directory),
            "dialect": self.build_file.dialect.value,
            "targets": list(self.targets),
            "cache_hit": self.cache_hit,
            "elapsed_ms": round(self.elapsed_ms, 3),
        }
