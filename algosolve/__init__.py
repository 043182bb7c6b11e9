"""Solutions to classic algorithm exercises as plain Python functions."""

__version__ = "0.1.0"