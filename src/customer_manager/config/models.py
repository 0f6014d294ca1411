"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, customer-manager.toml only
contains overrides. A fresh project needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_DB_FILENAME = "customers.db"


class DatabaseConfig(BaseModel):
    """[database] section.

    ``url`` is any SQLAlchemy async URL. When unset, a SQLite file named
    :data:`DEFAULT_DB_FILENAME` under the project root is used.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    url: str | None = None
    echo: bool = False
    auto_create: bool = True


class CmConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True, "extra": "forbid"}

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
