"""Two-player War simulation and king-majority statistics."""

__version__ = "0.1.0"
