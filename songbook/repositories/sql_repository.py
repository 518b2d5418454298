"""Record store backed by SQLAlchemy, same contract as the JSON store."""
from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from songbook.db.models import Song
from songbook.db.session import session_scope
from songbook.domain.records import Record
from songbook.repositories.json_storage import find_index, next_id

logger = logging.getLogger(__name__)


def _entity_to_record(entity: Song) -> Record:
    return Record(id=entity.id, title=entity.title, artist=entity.artist, year=entity.year)


class SQLRecordStore:
    """Full-snapshot persistence on a ``songs`` table."""

    next_id = staticmethod(next_id)
    find_index = staticmethod(find_index)

    def load_all(self) -> list[Record]:
        try:
            with session_scope() as session:
                rows = session.execute(select(Song).order_by(Song.position)).scalars().all()
                records = [_entity_to_record(row) for row in rows]
        except SQLAlchemyError as exc:
            logger.error("Could not read songs table: %s", exc)
            return []
        logger.info("Loaded %d songs from database", len(records))
        return records

    def save_all(self, records: Iterable[Record]) -> bool:
        """Replace the table contents in a single transaction."""
        records = list(records)
        try:
            with session_scope() as session:
                session.execute(delete(Song))
                session.add_all(
                    Song(id=record.id, position=pos, title=record.title, artist=record.artist, year=record.year)
                    for pos, record in enumerate(records)
                )
        except SQLAlchemyError as exc:
            logger.error("Could not write songs table: %s", exc)
            return False
        logger.info("Saved %d songs to database", len(records))
        return True
