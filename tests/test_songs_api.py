"""
HTTP-level tests for /api/canciones against a temporary data file.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garantiza que el paquete songbook sea importable durante los tests locales
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from songbook.app import create_app  # noqa: E402
from songbook.core import config as core_config  # noqa: E402

URL = "/api/canciones"
IMAGINE = {"titulo": "Imagine", "artista": "John Lennon", "año": "1971"}


@pytest.fixture()
def data_file(tmp_path, monkeypatch):
    """Apunta la app a archivos temporales y limpia la cache de settings."""
    data = tmp_path / "canciones.json"
    web = tmp_path / "web"
    web.mkdir()
    (web / "index.html").write_text("<html><body>Canciones</body></html>", encoding="utf-8")
    monkeypatch.setenv("SONGBOOK_DATA_FILE", str(data))
    monkeypatch.setenv("SONGBOOK_WEB_DIR", str(web))
    monkeypatch.setenv("SONGBOOK_STORAGE", "json")
    core_config.get_settings.cache_clear()
    yield data
    core_config.get_settings.cache_clear()


@pytest.fixture()
def client(data_file):
    with TestClient(create_app()) as test_client:
        yield test_client


def _seed(data_file: Path, records: list[dict]) -> None:
    data_file.write_text(json.dumps(records, ensure_ascii=False, indent=2), encoding="utf-8")


def test_list_empty(client):
    resp = client.get(URL)
    assert resp.status_code == 200
    assert resp.json() == {"exito": True, "datos": [], "mensaje": "Se encontraron 0 canciones"}


def test_create_on_empty_store(client, data_file):
    resp = client.post(URL, json=IMAGINE)
    assert resp.status_code == 201
    body = resp.json()
    assert body["exito"] is True
    assert body["datos"] == {"id": 1, "titulo": "Imagine", "artista": "John Lennon", "año": 1971}
    assert body["mensaje"] == 'Canción "Imagine" creada exitosamente'
    assert json.loads(data_file.read_text(encoding="utf-8")) == [body["datos"]]


def test_update_existing(client, data_file):
    _seed(data_file, [{"id": 1, "titulo": "Imagine", "artista": "John Lennon", "año": 1971}])
    resp = client.put(f"{URL}/1", json={**IMAGINE, "titulo": "Imagine (Remastered)"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["datos"]["titulo"] == "Imagine (Remastered)"
    assert body["datos"]["id"] == 1


def test_delete_unknown_id(client, data_file):
    _seed(data_file, [{"id": 1, "titulo": "Imagine", "artista": "John Lennon", "año": 1971}])
    resp = client.delete(f"{URL}/99")
    assert resp.status_code == 404
    assert resp.json()["exito"] is False


def test_delete_then_create_does_not_reuse_id(client, data_file):
    _seed(
        data_file,
        [
            {"id": 1, "titulo": "Imagine", "artista": "John Lennon", "año": 1971},
            {"id": 2, "titulo": "Yesterday", "artista": "The Beatles", "año": 1965},
        ],
    )
    deleted = client.delete(f"{URL}/1")
    assert deleted.status_code == 200
    assert deleted.json()["datos"]["titulo"] == "Imagine"
    created = client.post(URL, json={"titulo": "Help!", "artista": "The Beatles", "año": 1965})
    assert created.status_code == 201
    assert created.json()["datos"]["id"] == 3


def test_create_with_blank_title_is_bad_request(client, data_file):
    resp = client.post(URL, json={**IMAGINE, "titulo": "   "})
    assert resp.status_code == 400
    assert resp.json() == {"exito": False, "mensaje": "Faltan datos. Se necesita: titulo, artista y año"}
    assert not data_file.exists()


def test_create_with_non_numeric_year_is_bad_request(client):
    resp = client.post(URL, json={**IMAGINE, "año": "mil novecientos"})
    assert resp.status_code == 400
    assert resp.json()["exito"] is False


def test_create_without_body_is_bad_request(client):
    assert client.post(URL).status_code == 400


def test_malformed_json_is_bad_request(client):
    resp = client.post(URL, content="{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["exito"] is False


def test_non_object_body_is_bad_request(client):
    assert client.post(URL, json=["Imagine"]).status_code == 400


@pytest.mark.parametrize("song_id", ["abc", "0", "1.5"])
def test_non_numeric_ids_are_not_found(client, data_file, song_id):
    _seed(data_file, [{"id": 1, "titulo": "Imagine", "artista": "John Lennon", "año": 1971}])
    assert client.delete(f"{URL}/{song_id}").status_code == 404
    assert client.put(f"{URL}/{song_id}", json=IMAGINE).status_code == 404


def test_update_missing_fields_is_bad_request(client, data_file):
    _seed(data_file, [{"id": 1, "titulo": "Imagine", "artista": "John Lennon", "año": 1971}])
    resp = client.put(f"{URL}/1", json={"titulo": "Imagine"})
    assert resp.status_code == 400


def test_corrupted_file_lists_empty(client, data_file):
    data_file.write_text("[{", encoding="utf-8")
    resp = client.get(URL)
    assert resp.status_code == 200
    assert resp.json()["datos"] == []


def test_write_failure_is_server_error(client, data_file):
    data_file.mkdir()
    resp = client.post(URL, json=IMAGINE)
    assert resp.status_code == 500
    body = resp.json()
    assert body["exito"] is False
    assert "datos" not in body


def test_index_page(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "Canciones" in resp.text


def test_cors_headers(client):
    resp = client.get(URL, headers={"Origin": "http://example.test"})
    assert resp.headers.get("access-control-allow-origin") == "*"
