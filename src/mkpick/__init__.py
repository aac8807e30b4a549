"""mkpick: pick Make and Ninja build targets from the command line."""

__version__ = "0.3.0"
