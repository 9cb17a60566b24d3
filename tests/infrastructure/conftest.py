"""Shared fixtures for SQLAlchemy adapter tests."""

import pytest
from sqlalchemy import create_engine

from src.infrastructure.schema import create_schema


class SqliteDatabasePort:
    """DatabaseEnginePort serving a single SQLite engine."""

    def __init__(self, engine) -> None:
        self._engine = engine

    def get_engine(self):
        return self._engine


@pytest.fixture
def db_port(tmp_path):
    """Database port backed by a fresh SQLite file with the schema."""
    engine = create_engine(f"sqlite:///{tmp_path / 'caja.db'}", future=True)
    create_schema(engine)
    yield SqliteDatabasePort(engine)
    engine.dispose()
