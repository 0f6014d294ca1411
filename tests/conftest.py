"""Shared pytest fixtures and test helpers for customer-manager tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from click.testing import CliRunner
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from customer_manager.config.settings import CmSettings
from customer_manager.infrastructure.database.engine import create_db_engine
from customer_manager.infrastructure.database.schema import Customer
from customer_manager.infrastructure.store import Store


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment variables out of settings resolution."""
    for name in (
        "CUSTOMER_MANAGER_CONFIG",
        "CUSTOMER_MANAGER_DATABASE__URL",
        "CUSTOMER_MANAGER_DATABASE__ECHO",
        "CUSTOMER_MANAGER_DATABASE__AUTO_CREATE",
        "CUSTOMER_MANAGER_PROJECT_ROOT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> CmSettings:
    """Settings rooted at a temp directory (SQLite file inside it)."""
    return CmSettings.from_cli(project_root=tmp_path)


@pytest_asyncio.fixture
async def store(settings: CmSettings) -> AsyncIterator[Store]:
    """Store with the schema created."""
    s = Store(settings)
    await s.init()
    try:
        yield s
    finally:
        await s.close()


@pytest_asyncio.fixture
async def session(store: Store) -> AsyncIterator[AsyncSession]:
    """One session from the store, closed after the test."""
    async with store.session() as s:
        yield s


@pytest_asyncio.fixture
async def empty_engine(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    """Engine on a brand-new SQLite file with no tables."""
    engine = create_db_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI uses an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers (used across service test modules)
# ---------------------------------------------------------------------------


async def seed_customer(store: Store, name: str, **kwargs: Any) -> Customer:
    """Create a customer in its own session and return it (detached)."""
    from customer_manager.services.customer import CustomerService

    async with store.session() as s:
        return await CustomerService(s).create_customer(Customer(name=name, **kwargs))


async def fetch_customer(store: Store, customer_id: int) -> Customer | None:
    """Read a customer through a fresh session."""
    from customer_manager.services.customer import CustomerService

    async with store.session() as s:
        return await CustomerService(s).get_customer_by_id(customer_id)


async def count_customers(store: Store) -> int:
    """Number of rows currently in the store."""
    from customer_manager.services.customer import CustomerService

    async with store.session() as s:
        return len(await CustomerService(s).get_all_customers())
