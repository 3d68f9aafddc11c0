import pytest
from fastapi.testclient import TestClient

from nexaops_api.app.core.config import Settings
from nexaops_api.app.core.db import Database
from nexaops_api.app.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=str(tmp_path / "nexaops.db"),
        db_timeout=1.0,
        notification_delay_whatsapp=0.0,
        notification_delay_sms=0.0,
    )


@pytest.fixture
def database(settings):
    database = Database.from_settings(settings)
    database.init_db()
    return database


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # The context manager runs the startup hook, which applies migrations.
    with TestClient(app) as client:
        yield client


@pytest.fixture
def broken_database(tmp_path):
    """A database whose file can never be opened."""
    return Database(str(tmp_path / "missing" / "nexaops.db"), timeout=0.1)
