from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse, Response

router = APIRouter(tags=["pages"])


def _web_dir(request: Request) -> Path:
    web_dir = getattr(getattr(request.app, "state", None), "web_dir", None)
    if not web_dir:
        raise RuntimeError("web_dir no configurado")
    return Path(web_dir)


@router.get("/", include_in_schema=False)
def index(request: Request):
    page = _web_dir(request) / "index.html"
    if not page.exists():
        raise HTTPException(404, "Página no encontrada")
    return FileResponse(page, media_type="text/html")


@router.get("/favicon.ico", include_in_schema=False)
def favicon(request: Request):
    ico_path = _web_dir(request) / "favicon.ico"
    if ico_path.exists():
        return FileResponse(ico_path, media_type="image/x-icon")
    return Response(status_code=204)
