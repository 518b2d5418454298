from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garantiza que el paquete songbook sea importable durante los tests locales
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from songbook.domain.records import Record, coerce_year, parse_record_id  # noqa: E402


@pytest.mark.parametrize(
    "value, expected",
    [
        (1971, 1971),
        ("1995", 1995),
        (" 2001 ", 2001),
        (1971.0, 1971),
        ("1971.0", 1971),
        ("abc", None),
        ("", None),
        (None, None),
        (True, None),
        (1971.5, None),
        (float("nan"), None),
        ("inf", None),
    ],
)
def test_coerce_year(value, expected):
    assert coerce_year(value) == expected


@pytest.mark.parametrize("value, expected", [("1", 1), ("42", 42), (7, 7), ("abc", None), ("0", None), ("-3", None), ("1.5", None), ("", None), ("9" * 5000, None)])
def test_parse_record_id(value, expected):
    assert parse_record_id(value) == expected


def test_record_wire_keys():
    record = Record(id=1, title="Imagine", artist="John Lennon", year=1971)
    assert record.to_dict() == {"id": 1, "titulo": "Imagine", "artista": "John Lennon", "año": 1971}
    assert Record.from_dict(record.to_dict()) == record


def test_record_from_dict_rejects_bad_id():
    with pytest.raises(ValueError):
        Record.from_dict({"id": "1", "titulo": "a", "artista": "b", "año": 2000})


@pytest.mark.parametrize("bad", [None, "", "   ", 42])
def test_record_from_dict_rejects_bad_text(bad):
    with pytest.raises(ValueError):
        Record.from_dict({"id": 1, "titulo": bad, "artista": "b", "año": 2000})
    with pytest.raises(ValueError):
        Record.from_dict({"id": 1, "titulo": "a", "artista": bad, "año": 2000})
