from __future__ import annotations

import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from tasktracker.config import load_settings
from tasktracker.infra.db import init_db, make_engine, make_session_factory
from tasktracker.infra.logging import setup_logging
from tasktracker.web.app import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    setup_logging(settings)
    engine = make_engine(settings.database_url)
    try:
        init_db(engine, create_schema=settings.create_schema)
    except SQLAlchemyError as exc:
        logger.error("DB error: %s", exc)
        sys.exit(1)

    app = create_app(settings, session_factory=make_session_factory(engine))
    app.run(host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
