"""BaseService — foundation for session-bound services.

Every service receives an :class:`~sqlalchemy.ext.asyncio.AsyncSession` at
construction time. The session's lifetime belongs to the caller (one
session per logical request, see :meth:`Store.session`); services only
commit the work they start.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class BaseService:
    """Base for service-layer classes that work through one session.

    Usage::

        class CustomerService(BaseService):
            async def get_customer_by_id(self, customer_id: int) -> Customer | None:
                return await self._session.get(Customer, customer_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session
