"""Song record model and input normalisation helpers."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

ID_KEY = "id"
TITLE_KEY = "titulo"
ARTIST_KEY = "artista"
YEAR_KEY = "año"


@dataclass(frozen=True)
class Record:
    id: int
    title: str
    artist: str
    year: int

    def to_dict(self) -> dict:
        """Wire/storage form, keyed exactly as persisted."""
        return {
            ID_KEY: self.id,
            TITLE_KEY: self.title,
            ARTIST_KEY: self.artist,
            YEAR_KEY: self.year,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Record":
        """Parse a stored entry. Raises ValueError/KeyError/TypeError on bad shape."""
        record_id = raw[ID_KEY]
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            raise ValueError(f"invalid id: {record_id!r}")
        year = coerce_year(raw[YEAR_KEY])
        if year is None:
            raise ValueError(f"invalid year: {raw[YEAR_KEY]!r}")
        return cls(
            id=record_id,
            title=_stored_text(raw, TITLE_KEY),
            artist=_stored_text(raw, ARTIST_KEY),
            year=year,
        )


def _stored_text(raw: Mapping[str, Any], key: str) -> str:
    value = raw[key]
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"invalid {key}: {value!r}")
    return value


def clean_text(value: Any) -> str:
    """Strip strings; anything that is not a string counts as empty."""
    if not isinstance(value, str):
        return ""
    return value.strip()


def coerce_year(value: Any) -> Optional[int]:
    """
    Convert numeric input (int, integral float or numeric text) to int.

    Returns None for booleans, empty/non-numeric text, fractional or non-finite
    numbers.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return None
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        if not math.isfinite(number) or not number.is_integer():
            return None
        return int(number)
    return None


def parse_record_id(value: Any) -> Optional[int]:
    """Path ids arrive as text; anything but a positive integer is unknown."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    text = str(value or "").strip()
    if not text.isdecimal():
        return None
    try:
        number = int(text)
    except ValueError:
        # longer than the interpreter's int conversion limit
        return None
    return number if number > 0 else None
