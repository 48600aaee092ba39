"""Two-player War card game simulator."""

__version__ = "0.1.0"
