"""
JSON-file persistence adapter.

The whole collection lives in a single JSON array on disk. Every operation
reads it fresh and every mutation rewrites it in full (temp file + replace).
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional
import json
import logging
import os
import tempfile

from songbook.domain.records import Record

logger = logging.getLogger(__name__)


def next_id(records: Iterable[Record]) -> int:
    """1 for an empty collection, otherwise one past the highest id present."""
    ids = [record.id for record in records]
    if not ids:
        return 1
    return max(ids) + 1


def find_index(records: list[Record], record_id: int) -> Optional[int]:
    for idx, record in enumerate(records):
        if record.id == record_id:
            return idx
    return None


class JsonRecordStore:
    """Record collection stored as a pretty-printed JSON array."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    next_id = staticmethod(next_id)
    find_index = staticmethod(find_index)

    def read_records(self) -> list[Record]:
        """
        Strict read. Raises OSError when the file cannot be read and ValueError
        when it is not an array of valid, uniquely-identified records.
        """
        with self.path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, list):
            raise ValueError("data file does not hold a JSON array")
        try:
            records = [Record.from_dict(item) for item in raw]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid record: {exc!r}") from exc
        seen: set[int] = set()
        for record in records:
            if record.id in seen:
                raise ValueError(f"duplicate id: {record.id}")
            seen.add(record.id)
        return records

    def load_all(self) -> list[Record]:
        """
        Read the collection. Missing, unreadable or malformed files yield [].

        The fault is only reported through the log.
        """
        if not self.path.exists():
            logger.info("Data file %s not found; starting with an empty collection", self.path)
            return []
        try:
            records = self.read_records()
        except (OSError, ValueError) as exc:
            logger.error("Could not load %s: %s", self.path, exc)
            return []
        logger.info("Loaded %d songs from %s", len(records), self.path)
        return records

    def save_all(self, records: Iterable[Record]) -> bool:
        """Serialize and atomically replace the data file. False on any I/O error."""
        records = list(records)
        tmp_name = None
        try:
            payload = json.dumps([record.to_dict() for record in records], ensure_ascii=False, indent=2)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Could not write %s: %s", self.path, exc)
            return False
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass
        logger.info("Saved %d songs to %s", len(records), self.path)
        return True
