"""A text-based role-playing game with heroes, caves, weapons and SQLite persistence."""

__version__ = "1.0.0"

__all__ = ["__version__"]