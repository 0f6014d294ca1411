"""CustomerService — the five data-access operations over Customer.

Each method is one store round trip (plus one commit for writes). Nothing
is validated, retried, or translated: SQLAlchemy errors reach the caller
unchanged, and a missing record on lookup or delete is not an error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import inspect, select
from sqlalchemy.orm import make_transient_to_detached
from sqlalchemy.orm.attributes import flag_modified

from customer_manager.infrastructure.database.schema import Customer
from customer_manager.services.base import BaseService

if TYPE_CHECKING:
    from customer_manager.domain.customer import CustomerRecord

logger = logging.getLogger(__name__)


def customer_from_record(record: CustomerRecord) -> Customer:
    """Build a transient Customer carrying every field of *record*."""
    return Customer(**record.model_dump())


class CustomerService(BaseService):
    """Data access for Customer rows through the injected session."""

    async def get_all_customers(self) -> list[Customer]:
        """Every customer in store-native order (no ordering contract)."""
        result = await self._session.scalars(select(Customer))
        return list(result.all())

    async def get_customer_by_id(self, customer_id: int) -> Customer | None:
        """The customer with *customer_id*, or None if there is no such row."""
        return await self._session.get(Customer, customer_id)

    async def create_customer(self, customer: Customer) -> Customer:
        """Insert *customer* and commit.

        The store assigns ``id`` when it is None; the same object is returned
        with the generated values populated.
        """
        self._session.add(customer)
        await self._session.commit()
        logger.debug("Created customer %s", customer.id)
        return customer

    async def update_customer(self, customer: Customer) -> Customer:
        """Rewrite the whole row identified by ``customer.id`` and commit.

        Every non-key column is written from *customer*, whether or not it
        changed. Payload fields never set on a new or detached object are
        written as NULL; unloaded fields of an object already in this session
        are read back from the row first.
        Raises :class:`~sqlalchemy.orm.exc.StaleDataError` when no row has
        that id.
        """
        state = inspect(customer)
        missing = [attr.key for attr in state.mapper.column_attrs if attr.key not in state.dict]
        if missing and state.persistent:
            with self._session.no_autoflush:
                await self._session.refresh(customer, missing)
        else:
            for key in missing:
                setattr(customer, key, None)
        if state.transient:
            make_transient_to_detached(customer)

        self._session.add(customer)
        for attr in state.mapper.column_attrs:
            if not any(col.primary_key for col in attr.columns):
                flag_modified(customer, attr.key)

        await self._session.commit()
        logger.debug("Updated customer %s", customer.id)
        return customer

    async def delete_customer(self, customer_id: int) -> None:
        """Delete the customer with *customer_id*; no-op when it does not exist."""
        customer = await self._session.get(Customer, customer_id)
        if customer is None:
            return
        await self._session.delete(customer)
        await self._session.commit()
        logger.debug("Deleted customer %s", customer_id)
