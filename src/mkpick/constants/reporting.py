"""Constants for stdout formatting."""

from __future__ import annotations

from mkpick.types.common import OutputFormat

SCHEMA_VERSION: str = "1.0.0"

OUTPUT_FORMAT_TEXT: OutputFormat = "text"
OUTPUT_FORMAT_JSON: OutputFormat = "json"
VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({OUTPUT_FORMAT_TEXT, OUTPUT_FORMAT_JSON})
