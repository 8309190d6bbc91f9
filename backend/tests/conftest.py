"""Pytest configuration and fixtures for tests."""

import os
import sys

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from app.database import Base, build_engine, get_db  # noqa: E402


@pytest.fixture
def engine():
    """A fresh in-memory SQLite database per test.

    Services commit, so a rollback cannot isolate tests; a new database can.
    """
    engine = build_engine("sqlite:///:memory:")
    # Import all models so they're registered
    import app.models  # noqa: F401

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine) -> Session:
    """Provide a database session for each test."""
    SessionLocal = sessionmaker(bind=engine, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(engine):
    """TestClient wired to the per-test database. Lifespan is not run."""
    from app.main import app

    SessionLocal = sessionmaker(bind=engine, autoflush=False)

    def _get_test_db():
        session = SessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def listing_data(**overrides) -> dict:
    """Raw listing fields with sensible defaults (Berlin flat, 300k, 80 m²)."""
    data = dict(
        title="3-room apartment in Berlin",
        address="Hauptstraße 1",
        city="Berlin",
        postal_code="10115",
        latitude=52.52,
        longitude=13.40,
        price=300_000.0,
        size=80.0,
        rooms=3,
        property_type="apartment",
        year_built=1995,
        condition="good",
        estimated_rent=1200.0,
        source="manual",
    )
    data.update(overrides)
    return data
