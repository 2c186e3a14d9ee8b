from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask
from sqlalchemy.engine import make_url

from .attendance.controller import register as register_attendance
from .common.datetime_utils import parse_time_of_day
from .config import get_settings_module
from .container import build_container
from .core.constants import DEFAULT_WORKDAY_START
from .database.bootstrap import create_schema, list_tables, seed_default_employees
from .extensions import db
from .home.controller import register as register_home
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("employee_attendance").setLevel(level.upper())


def create_app(settings_module: Optional[str] = None, **overrides: Any) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    app.config.from_object(importlib.import_module(settings_module))
    app.config.update(overrides)

    _configure_logging(str(app.config.get("LOG_LEVEL", "INFO")))
    logger.info(
        "settings=%s db=%s",
        settings_module,
        make_url(app.config["SQLALCHEMY_DATABASE_URI"]).render_as_string(hide_password=True),
    )

    db.init_app(app)

    with app.app_context():
        if app.config.get("AUTO_INIT_DB"):
            create_schema(db)
            logger.info("schema ready (tables=%s)", ", ".join(list_tables(db)))
        if app.config.get("AUTO_SEED_DB"):
            seed_default_employees(db)

    workday_start = parse_time_of_day(app.config.get("WORKDAY_START")) or DEFAULT_WORKDAY_START
    container = build_container(db=db, workday_start=workday_start)
    app.extensions["attendance_container"] = container

    register_home(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
