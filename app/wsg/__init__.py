"""wsg - Reclaim disk space from project build and dependency artifacts."""

__version__ = "0.3.0"
