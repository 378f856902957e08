from __future__ import annotations

from flask import Blueprint, current_app, render_template
from sqlalchemy import func, select

from tasktracker.infra import models  # noqa: F401
from tasktracker.infra.db import Base


def storage_summary(session_factory) -> dict:
    with session_factory() as session:
        dialect = session.get_bind().dialect.name
        tables = [
            {
                "name": table.name,
                "columns": [column.name for column in table.columns],
                "rows": session.scalar(select(func.count()).select_from(table)) or 0,
            }
            for table in Base.metadata.sorted_tables
        ]
    return {"dialect": dialect, "tables": tables}


def show_console():
    summary = storage_summary(current_app.extensions["session_factory"])
    return render_template("console.html", **summary)


def init_console(app, path: str) -> None:
    bp = Blueprint("console", __name__)
    bp.add_url_rule(path, endpoint="show_console", view_func=show_console, methods=["GET"])
    app.register_blueprint(bp)
