"""
FastAPI routers: the song API and the page that consumes it.

Each module exposes an ``APIRouter`` included by ``songbook.app.create_app``.
"""
