import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import pagesync.models  # noqa: F401  (populate Base.metadata)
from pagesync.core.config import Settings
from pagesync.db.base import Base
from pagesync.db.session import get_db
from pagesync.main import create_app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db_session():
    """Fresh in-memory schema per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(
        DATABASE_URL="sqlite://",
        LOG_LEVEL="WARNING",
        RESOURCE_PAGE_SIZES={"audits": 10, "users": 5},
    )


@pytest.fixture()
def app(test_settings, db_session):
    app = create_app(test_settings)

    def _get_db_override():
        yield db_session

    app.dependency_overrides[get_db] = _get_db_override
    yield app
    app.dependency_overrides.clear()


@pytest.fixture()
def client(app) -> TestClient:
    with TestClient(app) as c:
        yield c
