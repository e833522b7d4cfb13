"""lsinfo - list filesystem entries together with their metadata."""

__version__ = "0.2.0"
