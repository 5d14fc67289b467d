import os

os.environ.setdefault("TESTING", "1")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from hr_api.db import get_db
from hr_api.models import Base
from hr_api.main import app
from hr_api.utils.types import LOAD_ORDER
from helpers import upload


# Fresh in-memory SQLite per test; foreign keys are switched on by hr_api.db
@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


# Override the get_db dependency in FastAPI
@pytest.fixture
def client(session_factory):
    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def loaded(client):
    """All sample CSVs loaded in foreign-key order."""
    for table in LOAD_ORDER:
        response = upload(client, table, f"{table}.csv")
        assert response.status_code == 200, response.json()
    return client
