"""Database ports for the cash register dashboard.

This module defines the application-layer protocol for accessing the
restaurant database engine. Infrastructure implementations are expected to
provide concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the restaurant database.

    Repositories can depend on this protocol instead of concrete database
    drivers or configuration details.
    """

    def get_engine(self) -> Engine:
        """Get the engine for the restaurant database.

        Returns:
            Engine: SQLAlchemy engine holding registers and ledgers.
        """


__all__ = ["DatabaseEnginePort"]
