"""
Persistence adapters.

Services depend on the ``RecordStore`` protocol; ``build_store`` picks the
JSON file (default) or the SQL table according to Settings.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol

from songbook.core.config import Settings
from songbook.domain.records import Record


class RecordStore(Protocol):
    def load_all(self) -> list[Record]: ...

    def save_all(self, records: Iterable[Record]) -> bool: ...

    def next_id(self, records: Iterable[Record]) -> int: ...

    def find_index(self, records: list[Record], record_id: int) -> Optional[int]: ...


def build_store(settings: Settings) -> RecordStore:
    if settings.storage_backend == "sql":
        from songbook.repositories.sql_repository import SQLRecordStore

        return SQLRecordStore()
    from songbook.repositories.json_storage import JsonRecordStore

    return JsonRecordStore(settings.data_file)
