from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.enums import StorageKind
from .database.bootstrap import apply_schema, list_tables
from .entries.controller import register as register_entries
from .logging_config import configure_logging
from .reports.controller import register as register_reports
from .settings.controller import register as register_settings

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    storage = StorageKind(getattr(settings, "STORAGE", StorageKind.MYSQL.value))
    db_config = getattr(settings, "DB_CONFIG", None)

    if storage == StorageKind.MYSQL:
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    else:
        logger.info("settings=%s storage=memory", settings_module)

    container = build_container(db_config=db_config, storage=storage)
    app.extensions["work_ledger"] = container

    register_entries(app, container)
    register_settings(app, container)
    register_reports(app, container)

    return app
