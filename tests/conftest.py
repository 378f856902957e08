from __future__ import annotations

import base64

import pytest
from flask import template_rendered

from tasktracker.config import Settings
from tasktracker.infra.db import init_db, make_engine, make_session_factory
from tasktracker.infra.repository import TaskRepository
from tasktracker.web.app import create_app

USERNAME = "tester"
PASSWORD = "s3cret"


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        secret_key="test-secret",
        auth_username=USERNAME,
        auth_password=PASSWORD,
        create_schema=True,
    )


@pytest.fixture()
def session_factory(settings: Settings):
    engine = make_engine(settings.database_url)
    init_db(engine, create_schema=True)
    yield make_session_factory(engine)
    engine.dispose()


@pytest.fixture()
def repo(session_factory) -> TaskRepository:
    return TaskRepository(session_factory)


@pytest.fixture()
def app(settings: Settings, session_factory):
    app = create_app(settings, session_factory=session_factory)
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def anonymous_client(app):
    return app.test_client()


@pytest.fixture()
def client(app):
    """Test client that sends Basic credentials with every request."""
    client = app.test_client()
    token = base64.b64encode(f"{USERNAME}:{PASSWORD}".encode()).decode()
    client.environ_base["HTTP_AUTHORIZATION"] = f"Basic {token}"
    return client


@pytest.fixture()
def captured_templates(app):
    recorded: list[tuple[str, dict]] = []

    def record(sender, template, context, **extra):
        recorded.append((template.name, context))

    template_rendered.connect(record, app)
    yield recorded
    template_rendered.disconnect(record, app)
