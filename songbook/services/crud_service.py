"""
Song CRUD use cases.

Each operation reads the collection fresh from the store, validates/mutates
it and writes it back in full. Outcomes are returned as ``Envelope`` values;
the HTTP layer only maps ``Envelope.status`` to a status code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional
import logging
import threading

from songbook.domain.records import (
    ARTIST_KEY,
    TITLE_KEY,
    YEAR_KEY,
    Record,
    clean_text,
    coerce_year,
    parse_record_id,
)
from songbook.repositories import RecordStore

logger = logging.getLogger(__name__)

STATUS_OK = "ok"
STATUS_CREATED = "created"
STATUS_BAD_REQUEST = "bad_request"
STATUS_NOT_FOUND = "not_found"
STATUS_SERVER_ERROR = "server_error"

MISSING_FIELDS_MESSAGE = "Faltan datos. Se necesita: titulo, artista y año"
INVALID_YEAR_MESSAGE = "El año debe ser un número entero"


@dataclass
class Envelope:
    success: bool
    message: str
    data: Any = None
    status: str = STATUS_OK

    def to_dict(self) -> dict:
        body: dict = {"exito": self.success}
        if self.data is not None:
            body["datos"] = self.data
        body["mensaje"] = self.message
        return body


@dataclass(frozen=True)
class SongInput:
    title: str
    artist: str
    year: int


def validate_input(payload: Any) -> tuple[Optional[SongInput], str]:
    """Return (fields, "") when valid, else (None, reason)."""
    if not isinstance(payload, Mapping):
        return None, MISSING_FIELDS_MESSAGE
    title = clean_text(payload.get(TITLE_KEY))
    artist = clean_text(payload.get(ARTIST_KEY))
    raw_year = payload.get(YEAR_KEY)
    if not title or not artist or raw_year is None or (isinstance(raw_year, str) and not raw_year.strip()):
        return None, MISSING_FIELDS_MESSAGE
    year = coerce_year(raw_year)
    if year is None:
        return None, INVALID_YEAR_MESSAGE
    return SongInput(title=title, artist=artist, year=year), ""


def _not_found(record_id: Any) -> Envelope:
    return Envelope(False, f"No se encontró una canción con ID {record_id}", status=STATUS_NOT_FOUND)


class CrudService:
    """List/create/update/delete over a RecordStore, one writer at a time."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store
        self._write_lock = threading.Lock()

    def list(self) -> Envelope:
        records = self.store.load_all()
        return Envelope(
            True,
            f"Se encontraron {len(records)} canciones",
            data=[record.to_dict() for record in records],
        )

    def create(self, payload: Any) -> Envelope:
        fields, reason = validate_input(payload)
        if fields is None:
            return Envelope(False, reason, status=STATUS_BAD_REQUEST)
        with self._write_lock:
            records = self.store.load_all()
            record = Record(
                id=self.store.next_id(records),
                title=fields.title,
                artist=fields.artist,
                year=fields.year,
            )
            records.append(record)
            if not self.store.save_all(records):
                return Envelope(False, "Error al guardar la canción en el archivo", status=STATUS_SERVER_ERROR)
        logger.info("Created song %d (%s)", record.id, record.title)
        return Envelope(
            True,
            f'Canción "{record.title}" creada exitosamente',
            data=record.to_dict(),
            status=STATUS_CREATED,
        )

    def update(self, raw_id: Any, payload: Any) -> Envelope:
        fields, reason = validate_input(payload)
        if fields is None:
            return Envelope(False, reason, status=STATUS_BAD_REQUEST)
        record_id = parse_record_id(raw_id)
        if record_id is None:
            return _not_found(raw_id)
        with self._write_lock:
            records = self.store.load_all()
            idx = self.store.find_index(records, record_id)
            if idx is None:
                return _not_found(record_id)
            record = Record(id=record_id, title=fields.title, artist=fields.artist, year=fields.year)
            records[idx] = record
            if not self.store.save_all(records):
                return Envelope(False, "Error al guardar los cambios", status=STATUS_SERVER_ERROR)
        logger.info("Updated song %d", record_id)
        return Envelope(True, f'Canción "{record.title}" actualizada exitosamente', data=record.to_dict())

    def delete(self, raw_id: Any) -> Envelope:
        record_id = parse_record_id(raw_id)
        if record_id is None:
            return _not_found(raw_id)
        with self._write_lock:
            records = self.store.load_all()
            idx = self.store.find_index(records, record_id)
            if idx is None:
                return _not_found(record_id)
            removed = records.pop(idx)
            if not self.store.save_all(records):
                return Envelope(False, "Error al guardar los cambios", status=STATUS_SERVER_ERROR)
        logger.info("Deleted song %d", record_id)
        return Envelope(True, f'Canción "{removed.title}" eliminada exitosamente', data=removed.to_dict())
