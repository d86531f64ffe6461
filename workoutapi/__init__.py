"""A small WSGI JSON service for recording workouts in SQLite."""

__version__ = "0.1.0"