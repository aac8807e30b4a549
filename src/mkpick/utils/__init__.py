"""Generic helpers shared across mkpick modules."""

from .ordering import unique_in_order

__all__ = ["unique_in_order"]
