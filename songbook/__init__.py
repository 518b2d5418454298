"""Songbook: a small FastAPI service for a JSON-backed list of songs."""

__version__ = "0.1.0"
