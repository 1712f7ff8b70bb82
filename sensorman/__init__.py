"""Client for a line-based home sensor server, with chart data and SQLite storage of readings."""

__version__ = "0.1.0"
__all__ = ["__version__"]