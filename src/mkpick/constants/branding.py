"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "mkpick"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: list, locate, and prepare Make / Ninja build targets"
