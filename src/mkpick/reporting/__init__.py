"""Reporting package for mkpick outputs."""

from .stdout import render_listing, render_listings, render_location

__all__ = ["render_listing", "render_listings", "render_location"]
