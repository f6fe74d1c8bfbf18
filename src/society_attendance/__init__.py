"""Society Attendance package.

Organized by feature modules (officers, members, events, attendance, reports)
with a thin Flask controller layer over service/repository layers.
"""
from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_officer, list_tables
from .events.controller import register as register_events
from .members.controller import register as register_members
from .officers.controller import register as register_officers
from .reports.controller import register as register_reports
from .settings import get_settings_module

SQL_DIR = Path(__file__).resolve().parent / "database"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    log_level = getattr(settings, "LOG_LEVEL", "INFO")
    app.logger.setLevel(log_level)
    logging.getLogger(__package__).setLevel(log_level)
    app.logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config, schema_path=SQL_DIR / "schema.sql")
            app.logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
        if getattr(settings, "AUTO_SEED_DB", False):
            apply_seed_sql(db_config, seed_path=SQL_DIR / "seed.sql")
            ensure_demo_officer(db_config)
            app.logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            email_domain=getattr(settings, "ALLOWED_EMAIL_DOMAIN", "sorsu.edu.ph"),
            members_per_page=int(getattr(settings, "MEMBERS_PER_PAGE", 10)),
            afternoon_start_hour=int(getattr(settings, "AFTERNOON_START_HOUR", 12)),
            academic_year=getattr(settings, "ACADEMIC_YEAR", None),
        )

    app.extensions["container"] = container

    register_officers(app, container)
    register_members(app, container)
    register_events(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
