"""Shared fixtures: an in-memory SQLite database per test."""

import datetime
from zoneinfo import ZoneInfo

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import snoozy.db.base  # noqa: F401

TZ = ZoneInfo("Europe/Berlin")


@pytest.fixture
def db_engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool, )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(db_engine):
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def tz():
    return TZ


@pytest.fixture
def now():
    """Sunday afternoon, well clear of any DST switch within 30 days."""
    return datetime.datetime(2026, 10, 18, 14, 30, tzinfo=TZ)
