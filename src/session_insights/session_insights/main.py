from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module, load_settings

from .common.logging_setup import configure_logging
from .container import Container, build_container
from .core.constants import DEFAULT_ERROR_BANNER_SECONDS, DEFAULT_PAGE_SIZE, DEFAULT_ROSTER_REFRESH_SECONDS
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig
from .sessions.controller import register as register_sessions

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = load_settings()
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PAGE_SIZE"] = int(getattr(settings, "PAGE_SIZE", DEFAULT_PAGE_SIZE))
    app.config["ROSTER_REFRESH_SECONDS"] = int(getattr(settings, "ROSTER_REFRESH_SECONDS", DEFAULT_ROSTER_REFRESH_SECONDS))
    app.config["ERROR_BANNER_SECONDS"] = int(getattr(settings, "ERROR_BANNER_SECONDS", DEFAULT_ERROR_BANNER_SECONDS))

    configure_logging(level=getattr(settings, "LOG_LEVEL", "INFO"), debug=app.config["DEBUG"])

    # Helpful startup info to see which database the roster comes from.
    logger.info("settings=%s db=%s", settings_module, DBConfig.from_settings(db_config).describe())

    if container is None:
        database_dir = Path(__file__).resolve().parents[3] / "database"
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=database_dir / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=database_dir / "seed.sql")
            logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            page_size=app.config["PAGE_SIZE"],
            roster_refresh_seconds=app.config["ROSTER_REFRESH_SECONDS"],
        )

    register_sessions(app, container)

    return app
