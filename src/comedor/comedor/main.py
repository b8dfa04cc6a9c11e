from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from loguru import logger

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_SERVICE_DAYS
from .core.logger import setup_logger
from .database.bootstrap import apply_schema, list_tables
from .employees.seed import seed_demo_data
from .confirmations.controller import register as register_confirmations
from .employees.controller import register as register_employees
from .menus.controller import register as register_menus
from .reports.controller import register as register_reports
from .users.controller import register as register_users
from .weekdays.controller import register as register_weekdays


def create_app(settings_module: Optional[str] = None, **overrides) -> Flask:
    """Build the Flask app.

    ``overrides`` are passed to ``build_container`` (tests inject a store or an
    identity provider this way).
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logger(level=getattr(settings, "LOG_LEVEL", "INFO"), log_file=getattr(settings, "LOG_FILE", None))

    backend = str(getattr(settings, "DOCUMENT_STORE", "memory"))
    db_config = getattr(settings, "DB_CONFIG", {})
    logger.info("Starting comedor admin (settings={}, store={})", settings_module, backend)

    container = build_container(
        **{
            "store_backend": backend,
            "db_config": db_config,
            "dev_tokens": getattr(settings, "DEV_TOKENS", {}),
            "service_days": getattr(settings, "SERVICE_DAYS", None) or DEFAULT_SERVICE_DAYS,
            **overrides,
        }
    )

    if container.conn is not None and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn)
        logger.info("Schema ready (tables={})", len(list_tables(container.conn)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        created = seed_demo_data(container.departments_repo, container.employees_repo)
        logger.info("Demo seed ready ({} employee(s) created)", created)

    app.extensions["comedor"] = container

    register_users(app, container)
    register_weekdays(app, container)
    register_menus(app, container)
    register_confirmations(app, container)
    register_employees(app, container)
    register_reports(app, container)

    return app
