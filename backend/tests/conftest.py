"""Shared fixtures."""
import os

# Keep the module-level engine off the working directory
os.environ.setdefault("HIVE_DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hive_engine.database import Base
from hive_engine import models  # noqa: F401
from hive_engine.demo_data import DEMO_USERS, DEMO_EVENTS
from hive_engine.records import HiveUser


@pytest.fixture
def db_session():
    """Create in-memory database session for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def demo_users():
    return DEMO_USERS


@pytest.fixture
def demo_events():
    return DEMO_EVENTS


@pytest.fixture
def make_user():
    """Factory for users with sensible defaults."""
    def _make(user_id, interests=(), events=(), strength=0.5, **kwargs):
        return HiveUser(
            id=user_id,
            name=kwargs.pop("name", user_id),
            interests=tuple(interests),
            events_attended=tuple(events),
            connection_strength=strength,
            **kwargs
        )
    return _make
