from __future__ import annotations

import logging

from flask import Flask, render_template
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from tasktracker.config import Settings, load_settings
from tasktracker.infra.db import init_db, make_engine, make_session_factory
from tasktracker.infra.repository import TaskRepository
from tasktracker.services.task_service import TaskService

from . import routes
from .console import init_console
from .security import current_user, init_security

logger = logging.getLogger(__name__)


def _storage_error(exc: SQLAlchemyError):
    logger.exception("Storage failure: %s", exc)
    return render_template("error.html"), 500


def create_app(settings: Settings | None = None, session_factory: sessionmaker | None = None) -> Flask:
    settings = settings or load_settings()
    if session_factory is None:
        engine = make_engine(settings.database_url)
        init_db(engine, create_schema=settings.create_schema)
        session_factory = make_session_factory(engine)

    app = Flask(__name__)
    app.config["SECRET_KEY"] = settings.secret_key
    app.extensions["settings"] = settings
    app.extensions["session_factory"] = session_factory
    app.extensions["task_service"] = TaskService(TaskRepository(session_factory))

    init_security(
        app,
        username=settings.auth_username,
        password=settings.auth_password,
        public_paths=("/login", "/static", settings.console_path),
    )
    init_console(app, settings.console_path)
    app.register_blueprint(routes.bp)
    app.register_error_handler(SQLAlchemyError, _storage_error)
    app.jinja_env.globals["current_user"] = current_user

    logger.info("Application ready, console at %s", settings.console_path)
    return app
