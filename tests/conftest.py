"""Shared fixtures: an in-memory database seeded with the default catalog."""

import datetime

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.db.init_db import seed_practices
from app.db.repositories.practice import PracticeRepository
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.rule.clock import LocalClock


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        seed_practices(session)
        yield session


@pytest.fixture
def user(session) -> User:
    return UserRepository(session).create(User(email="ana@example.com", hashed_password="x"))


@pytest.fixture
def practice_ids(session) -> dict[str, int]:
    """Catalog ids by practice key."""
    return {p.key: p.id for p in PracticeRepository(session).get_all()}


def _fixed_clock(year: int, month: int, day: int, hour: int = 15) -> LocalClock:
    instant = datetime.datetime(year, month, day, hour, 0, tzinfo=datetime.timezone.utc)
    return LocalClock("America/New_York", now=lambda: instant)


@pytest.fixture
def clock_at():
    """Factory for a New York clock frozen at a UTC instant."""
    return _fixed_clock


@pytest.fixture
def lent_friday() -> LocalClock:
    # 2026-03-06 10:00 in New York, a Friday in Lent
    return _fixed_clock(2026, 3, 6)
