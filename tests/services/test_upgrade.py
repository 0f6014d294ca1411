"""Tests for UpgradeService — database migration with Alembic."""

from __future__ import annotations

import pytest
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncEngine

from customer_manager.infrastructure.database.migrations import current_revision
from customer_manager.infrastructure.store import Store
from customer_manager.services.upgrade import UpgradeService

pytestmark = pytest.mark.asyncio


async def _table_names(engine: AsyncEngine) -> set[str]:
    async with engine.connect() as conn:
        return set(await conn.run_sync(lambda c: inspect(c).get_table_names()))


# ---------------------------------------------------------------------------
# check_pending()
# ---------------------------------------------------------------------------


class TestCheckPending:
    async def test_check_pending_after_stamp(self, store: Store) -> None:
        """Stamped database has 0 pending."""
        svc = UpgradeService(store.engine)
        await svc.stamp_current()

        result = await svc.check_pending()
        assert result.ok
        assert result.data["pending_count"] == 0
        assert result.data["current"] == result.data["head"]

    async def test_check_pending_unstamped_db(self, store: Store) -> None:
        """Tables created without alembic_version show pending migrations."""
        result = await UpgradeService(store.engine).check_pending()
        assert result.ok
        assert result.data["current"] is None
        assert result.data["pending_count"] > 0
        assert result.data["pending"][0]["revision"] == "001_baseline"

    async def test_check_pending_reports_head_revision(self, empty_engine: AsyncEngine) -> None:
        result = await UpgradeService(empty_engine).check_pending()
        assert result.ok
        assert result.data["head"] == "001_baseline"


# ---------------------------------------------------------------------------
# apply()
# ---------------------------------------------------------------------------


class TestApply:
    async def test_apply_already_current(self, store: Store) -> None:
        svc = UpgradeService(store.engine)
        await svc.stamp_current()

        result = await svc.apply()
        assert result.ok
        assert result.data["applied_count"] == 0
        assert "already up to date" in result.data["message"].lower()

    async def test_apply_on_empty_database_creates_tables(
        self, empty_engine: AsyncEngine
    ) -> None:
        result = await UpgradeService(empty_engine).apply()
        assert result.ok
        assert result.data["applied_count"] == 1
        assert result.data["stamped"] is False
        assert "customers" in await _table_names(empty_engine)
        assert await current_revision(empty_engine) == "001_baseline"

    async def test_apply_stamps_existing_tables(self, store: Store) -> None:
        """Tables from create_all are stamped rather than re-created."""
        result = await UpgradeService(store.engine).apply()
        assert result.ok
        assert result.data["stamped"] is True
        assert result.data["applied_count"] == 0
        assert await current_revision(store.engine) == "001_baseline"

    async def test_apply_twice_is_noop(self, empty_engine: AsyncEngine) -> None:
        svc = UpgradeService(empty_engine)
        await svc.apply()
        second = await svc.apply()
        assert second.ok
        assert second.data["applied_count"] == 0


# ---------------------------------------------------------------------------
# stamp_current()
# ---------------------------------------------------------------------------


class TestStampCurrent:
    async def test_stamp_reports_head(self, store: Store) -> None:
        result = await UpgradeService(store.engine).stamp_current()
        assert result.ok
        assert result.data["stamped"] is True
        assert result.data["current"] == "001_baseline"
