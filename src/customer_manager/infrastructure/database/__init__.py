"""Async database engine, ORM schema, and migrations via SQLAlchemy."""

from customer_manager.infrastructure.database.engine import (
    create_db_engine,
    create_session_factory,
    init_database,
)
from customer_manager.infrastructure.database.schema import Base, Customer, customers, metadata

__all__ = [
    "Base",
    "Customer",
    "create_db_engine",
    "create_session_factory",
    "customers",
    "init_database",
    "metadata",
]
