"""Copy the JSON song file into the SQL table configured by DATABASE_URL."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

# Garantiza que el paquete songbook sea importable al ejecutarse directamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from songbook.core.config import get_settings  # noqa: E402
from songbook.db.create_tables import create_all  # noqa: E402
from songbook.repositories.json_storage import JsonRecordStore  # noqa: E402
from songbook.repositories.sql_repository import SQLRecordStore  # noqa: E402


def migrate(source: Path) -> int:
    if not source.exists():
        raise SystemExit(f"Archivo no encontrado: {source}")
    try:
        records = JsonRecordStore(source).read_records()
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Archivo de origen invalido, no se migra nada: {exc}") from exc
    try:
        create_all()
    except (RuntimeError, SQLAlchemyError) as exc:
        raise SystemExit(f"Base de datos no disponible: {exc}") from exc
    if not SQLRecordStore().save_all(records):
        raise SystemExit("No se pudieron guardar las canciones en la base de datos")
    return len(records)


def main() -> None:
    ap = argparse.ArgumentParser(description="Migrar canciones JSON -> SQL")
    ap.add_argument("--source", help="Archivo JSON de origen (default: SONGBOOK_DATA_FILE)")
    args = ap.parse_args()
    source = Path(args.source) if args.source else get_settings().data_file
    total = migrate(source)
    print(f"{total} canciones migradas a la base de datos.")


if __name__ == "__main__":
    main()
