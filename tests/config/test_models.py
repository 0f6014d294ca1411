"""Tests for the configuration section models."""

import pytest
from pydantic import ValidationError

from customer_manager.config.models import DEFAULT_DB_FILENAME, CmConfig, DatabaseConfig


class TestDatabaseConfig:
    def test_defaults(self) -> None:
        cfg = DatabaseConfig()
        assert cfg.url is None
        assert cfg.echo is False
        assert cfg.auto_create is True

    def test_frozen(self) -> None:
        cfg = DatabaseConfig()
        with pytest.raises(ValidationError):
            cfg.echo = True  # type: ignore[misc]

    def test_default_filename(self) -> None:
        assert DEFAULT_DB_FILENAME == "customers.db"


class TestCmConfig:
    def test_defaults(self) -> None:
        cfg = CmConfig()
        assert cfg.database == DatabaseConfig()

    def test_sparse_validation(self) -> None:
        cfg = CmConfig.model_validate({"database": {"echo": True}})
        assert cfg.database.echo is True
        assert cfg.database.auto_create is True  # default preserved

    def test_unknown_section_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CmConfig.model_validate({"server": {"port": 8080}})
