"""Order-preserving helpers for target lists."""

from __future__ import annotations

from collections.abc import Iterable


def unique_in_order(items: Iterable[str]) -> list[str]:
    """Drop repeated names, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))
