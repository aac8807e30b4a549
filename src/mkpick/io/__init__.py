"""Shared I/O helpers."""

from .process import CommandResult, run_command

__all__ = ["CommandResult", "run_command"]
