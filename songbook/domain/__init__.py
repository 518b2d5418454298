"""Domain types and pure helpers (no storage, no HTTP)."""

from .records import Record

__all__ = ["Record"]
