"""Command-line interface for mkpick."""

from .main import build_parser, main

__all__ = ["build_parser", "main"]
