from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "comedor"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from comedor.container import build_container
from comedor.core.logger import setup_logger
from comedor.employees.seed import seed_demo_data

from loguru import logger


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    setup_logger(level=getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(store_backend="mysql", db_config=settings.DB_CONFIG)
    created = seed_demo_data(container.departments_repo, container.employees_repo)
    logger.info("Seeded demo departments ({} employee(s) created)", created)


if __name__ == "__main__":
    main()
