"""
Core utilities shared across the Songbook API: configuration and logging setup.

Services and routers depend on these primitives instead of reading the
environment or configuring handlers themselves.
"""
