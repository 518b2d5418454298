import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from songbook.core.config import Settings, get_settings
from songbook.core.logging_config import setup_logging
from songbook.repositories import RecordStore, build_store
from songbook.routers import pages as pages_router
from songbook.routers import songs as songs_router
from songbook.services.crud_service import MISSING_FIELDS_MESSAGE, CrudService

logger = logging.getLogger(__name__)


class CachedStaticFiles(StaticFiles):
    def set_headers(self, scope, resp, path, stat_result):
        # assets are small and edited by hand; always revalidate
        resp.headers["Cache-Control"] = "no-cache"


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError):
        logger.warning("Rejected malformed request to %s: %s", request.url.path, exc.errors())
        return JSONResponse({"exito": False, "mensaje": MISSING_FIELDS_MESSAGE}, status_code=400)

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse({"exito": False, "mensaje": "Error interno del servidor"}, status_code=500)


def _prepare_sql_backend() -> None:
    from songbook.db.create_tables import create_all

    create_all()


def create_app(settings: Optional[Settings] = None, store: Optional[RecordStore] = None) -> FastAPI:
    """Build the FastAPI app; ``store`` overrides the one chosen from settings."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title="Songbook API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    _install_error_handlers(app)

    if store is None:
        if settings.storage_backend == "sql":
            _prepare_sql_backend()
        store = build_store(settings)
    app.state.settings = settings
    app.state.crud_service = CrudService(store)
    app.state.web_dir = settings.web_dir

    app.include_router(songs_router.router)
    app.include_router(pages_router.router)
    if settings.web_dir.is_dir():
        app.mount("/static", CachedStaticFiles(directory=settings.web_dir), name="static")
    else:
        logger.warning("Web directory %s not found; static files disabled", settings.web_dir)

    logger.info("Songbook ready (storage=%s, env=%s)", settings.storage_backend, settings.app_env)
    return app
