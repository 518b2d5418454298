"""
Use cases for the Songbook API.

Routers call these services instead of touching the record store directly.
"""
