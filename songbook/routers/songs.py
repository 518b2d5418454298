from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from songbook.services.crud_service import (
    STATUS_BAD_REQUEST,
    STATUS_CREATED,
    STATUS_NOT_FOUND,
    STATUS_OK,
    STATUS_SERVER_ERROR,
    CrudService,
    Envelope,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/canciones", tags=["canciones"])

HTTP_STATUS = {
    STATUS_OK: 200,
    STATUS_CREATED: 201,
    STATUS_BAD_REQUEST: 400,
    STATUS_NOT_FOUND: 404,
    STATUS_SERVER_ERROR: 500,
}


def _get_crud_service(request: Request) -> CrudService:
    svc = getattr(getattr(request.app, "state", None), "crud_service", None)
    if not svc:
        raise RuntimeError("CrudService no configurado")
    return svc


def _respond(envelope: Envelope) -> JSONResponse:
    return JSONResponse(envelope.to_dict(), status_code=HTTP_STATUS.get(envelope.status, 500))


@router.get("")
def list_songs(request: Request):
    logger.info("Listing all songs")
    return _respond(_get_crud_service(request).list())


@router.post("")
def create_song(request: Request, payload: Any = Body(None)):
    logger.info("Creating song: %s", payload)
    return _respond(_get_crud_service(request).create(payload))


@router.put("/{song_id}")
def update_song(song_id: str, request: Request, payload: Any = Body(None)):
    logger.info("Updating song %s: %s", song_id, payload)
    return _respond(_get_crud_service(request).update(song_id, payload))


@router.delete("/{song_id}")
def delete_song(song_id: str, request: Request):
    logger.info("Deleting song %s", song_id)
    return _respond(_get_crud_service(request).delete(song_id))
