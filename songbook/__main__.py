"""Run the Songbook server: ``python -m songbook``."""
from __future__ import annotations

import uvicorn

from songbook.core.config import get_settings
from songbook.core.logging_config import setup_logging


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file or None)
    base = f"http://{settings.host}:{settings.port}"
    print("=" * 50)
    print("Songbook server")
    print(f"  Sitio web: {base}/")
    print(f"  API:       {base}/api/canciones")
    print(f"  Datos:     {settings.data_file if settings.storage_backend == 'json' else settings.database_url}")
    print("=" * 50)
    uvicorn.run(
        "songbook.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
