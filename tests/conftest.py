# tests/conftest.py
"""Shared fixtures: a throwaway SQLite database per test and row factories."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Must be set before app.config is imported anywhere
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FILE", "")

import pytest
from datetime import datetime, timedelta
from sqlalchemy.orm import sessionmaker
from app.database import build_engine, create_tables, get_db
from app.models.cab import Cab, CabStatus
from app.models.user import User


@pytest.fixture
def engine(tmp_path):
    eng = build_engine(f"sqlite:///{tmp_path / 'bookings.db'}")
    create_tables(bind=eng)
    yield eng
    eng.dispose()


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


@pytest.fixture
def make_user(db):
    """Insert a user directly (skips bcrypt). Subscription valid for 30 days by default."""
    counter = {"n": 0}

    def _make(bookings_remaining=1, subscription_end_date="default", name=None):
        counter["n"] += 1
        if subscription_end_date == "default":
            subscription_end_date = datetime.utcnow() + timedelta(days=30)
        user = User(
            name=name or f"User {counter['n']}",
            email=f"user{counter['n']}@example.com",
            password_hash="not-a-real-hash",
            subscription_end_date=subscription_end_date,
            bookings_remaining=bookings_remaining,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def make_cab(db):
    counter = {"n": 0}

    def _make(status=CabStatus.AVAILABLE, capacity=4):
        counter["n"] += 1
        cab = Cab(
            cab_name=f"Cab {counter['n']}",
            license_plate=f"PLATE-{counter['n']:04d}",
            capacity=capacity,
            status=status,
        )
        db.add(cab)
        db.commit()
        db.refresh(cab)
        return cab

    return _make


@pytest.fixture
def client(session_factory):
    from fastapi.testclient import TestClient
    from app.main import app

    def _get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def fetch(session_factory):
    """Read a row through a fresh session so no cached state leaks into assertions."""
    def _fetch(model, pk):
        session = session_factory()
        try:
            return session.get(model, pk)
        finally:
            session.close()

    return _fetch
