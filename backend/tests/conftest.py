import os

# Settings are read at import time; the tests never reach a real store.
os.environ.setdefault("DB_USER", "test")
os.environ.setdefault("DB_PASS", "test")
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_PORT", "3306")
os.environ.setdefault("DB_NAME", "users_test")

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.core.db import Database  # noqa: E402
from app.initial_data import init_schema  # noqa: E402
from app.main import create_app  # noqa: E402


@pytest.fixture
def db() -> Generator[Database, None, None]:
    """In-memory SQLite store with an empty users table, shared by all threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    database = Database(engine)
    init_schema(database)
    yield database
    database.dispose()


@pytest.fixture
def client(db: Database) -> Generator[TestClient, None, None]:
    with TestClient(create_app(db)) as c:
        yield c
