"""Car sharing company manager."""

__version__ = "0.1.0"
