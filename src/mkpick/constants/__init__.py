"""Shared constants for mkpick."""
