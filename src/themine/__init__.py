"""The Mine: a single-player dig-and-dodge grid game."""

__version__ = "0.1.0"
