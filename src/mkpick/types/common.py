"""Cross-module type aliases."""

from __future__ import annotations

from enum import Enum
from typing import Literal

type ExtractionMethod = Literal["default", "qp"]
type OutputFormat = Literal["text", "json"]

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
type JsonObject = dict[str, JsonValue]


class BuildDialect(str, Enum):
    """Build tool whose file format and semantics apply to a build file."""

    MAKE = "make"
    NINJA = "ninja"
