"""Pytest configuration and fixtures."""

import pytest
from fakes import FakeTrainer
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from player_ai.db import Base
from player_ai.inference import ClassifierHolder
from player_ai.main import create_app
from player_ai.models import PlayerPerformance
from player_ai.repository import PerformanceRepository


@pytest.fixture
def engine():
    """In-memory SQLite shared by every connection of a single test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def repository(session):
    return PerformanceRepository(session)


@pytest.fixture
def holder():
    return ClassifierHolder()


@pytest.fixture
def fake_trainer():
    return FakeTrainer()


@pytest.fixture
def app(engine, fake_trainer):
    return create_app(engine=engine, trainer=fake_trainer)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_record(repository):
    """Insert a record directly through storage (no retrain)."""

    def _make(average=40.0, strike_rate=120.0, bowling_average=30.0, economy_rate=6.0, fielding_stats=10, label=0):
        return repository.save(
            PlayerPerformance(
                average=average,
                strike_rate=strike_rate,
                bowling_average=bowling_average,
                economy_rate=economy_rate,
                fielding_stats=fielding_stats,
                label=label,
            )
        )

    return _make


@pytest.fixture
def sample_payload():
    """Create payload in wire (camelCase) format."""
    return {
        "average": 50.0,
        "strikeRate": 140.0,
        "bowlingAverage": 20.0,
        "economyRate": 4.0,
        "fieldingStats": 15,
        "label": 1,
    }
