#!/usr/bin/env python3
"""
Agregar una cancion directamente en el almacen configurado (JSON o SQL).

Uso:
  python scripts/add_song.py --titulo "Imagine" --artista "John Lennon" --anio 1971
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Garantiza que el paquete songbook sea importable al ejecutarse directamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from songbook.core.config import get_settings  # noqa: E402
from songbook.repositories import build_store  # noqa: E402
from songbook.services.crud_service import CrudService  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Agregar una cancion")
    ap.add_argument("--titulo", required=True, help="Titulo de la cancion")
    ap.add_argument("--artista", required=True, help="Artista o banda")
    ap.add_argument("--anio", required=True, help="Año de publicacion (entero)")
    args = ap.parse_args()

    service = CrudService(build_store(get_settings()))
    try:
        result = service.create({"titulo": args.titulo, "artista": args.artista, "año": args.anio})
    except RuntimeError as exc:
        # SQL backend selected without DATABASE_URL
        raise SystemExit(f"Error: {exc}") from exc
    if not result.success:
        raise SystemExit(result.message)
    print(f"OK: {result.message}")
    print(f"  ID: {result.data['id']}")


if __name__ == "__main__":
    main()
