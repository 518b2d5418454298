"""Database helpers for the SQL-backed record store."""

from .session import Base, get_engine, reset_engine, session_scope

__all__ = ["Base", "get_engine", "reset_engine", "session_scope"]
