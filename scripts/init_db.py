from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "comedor"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from comedor.core.logger import setup_logger
from comedor.database.bootstrap import apply_schema, list_tables
from comedor.database.connection import DBConfig, DatabaseConnection

from loguru import logger


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    setup_logger(level=getattr(settings, "LOG_LEVEL", "INFO"))

    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(settings.DB_CONFIG))
    apply_schema(conn)
    tables = list_tables(conn)

    cfg = conn.config
    logger.info("Applied documents schema -> {}@{}:{}/{} (tables={})", cfg.user, cfg.host, cfg.port, cfg.database, len(tables))


if __name__ == "__main__":
    main()
