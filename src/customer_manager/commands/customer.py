"""Command group: list, get, create, update, and delete customers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from customer_manager.commands._base import CmGroup
from customer_manager.domain.customer import CustomerRecord
from customer_manager.services.customer import CustomerService, customer_from_record
from customer_manager.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from customer_manager.commands._context import AppContext
    from customer_manager.infrastructure.store import Store

_CUSTOMER_EXAMPLES = """\
  customer-manager customer list
  customer-manager customer get 1
  customer-manager customer create --name "Acme" --email ops@acme.test
  customer-manager customer update 1 --name "Acme Corp" --email ops@acme.test
  customer-manager customer delete 1
  customer-manager --json customer list"""


def _payload_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Shared payload options for create and update."""
    fn = click.option("--address", default=None, help="Postal address.")(fn)
    fn = click.option("--phone", default=None, help="Phone number.")(fn)
    fn = click.option("--email", default=None, help="Email address (unique).")(fn)
    fn = click.option("--name", required=True, help="Customer name.")(fn)
    return fn


@click.group(cls=CmGroup, examples=_CUSTOMER_EXAMPLES)
@click.pass_obj
def customer(app: AppContext) -> None:
    """List, read, create, update, and delete customers."""


@customer.command(
    "list",
    examples="""\
  customer-manager customer list
  customer-manager -q customer list
  customer-manager --json customer list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every customer."""
    op = "list_customers"

    async def _work(store: Store) -> ServiceResult:
        async with store.session() as session:
            rows = await CustomerService(session).get_all_customers()
            items = [CustomerRecord.model_validate(row).to_data() for row in rows]
        return ServiceResult(ok=True, op=op, data={"count": len(items), "items": items})

    app.emit(app.run(op, _work))


@customer.command(
    examples="""\
  customer-manager customer get 1
  customer-manager --json customer get 42""",
)
@click.argument("customer_id", type=int)
@click.pass_obj
def get(app: AppContext, customer_id: int) -> None:
    """Show one customer by ID."""
    op = "get_customer"

    async def _work(store: Store) -> ServiceResult:
        async with store.session() as session:
            row = await CustomerService(session).get_customer_by_id(customer_id)
            if row is None:
                return ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code="NOT_FOUND",
                        message=f"No customer found with ID {customer_id}",
                        detail={"id": customer_id},
                    ),
                )
            return ServiceResult(ok=True, op=op, data=CustomerRecord.model_validate(row).to_data())

    app.emit(app.run(op, _work))


@customer.command(
    examples="""\
  customer-manager customer create --name "Acme"
  customer-manager customer create --name "Acme" --email ops@acme.test --phone 555-0100
  customer-manager customer create --id 7 --name Initech""",
)
@_payload_options
@click.option("--id", "customer_id", type=int, default=None, help="Explicit ID (default: assigned).")
@click.pass_obj
def create(
    app: AppContext,
    name: str,
    email: str | None,
    phone: str | None,
    address: str | None,
    customer_id: int | None,
) -> None:
    """Create a customer."""
    op = "create_customer"
    record = CustomerRecord(id=customer_id, name=name, email=email, phone=phone, address=address)

    async def _work(store: Store) -> ServiceResult:
        async with store.session() as session:
            row = await CustomerService(session).create_customer(customer_from_record(record))
            return ServiceResult(ok=True, op=op, data=CustomerRecord.model_validate(row).to_data())

    app.emit(app.run(op, _work))


@customer.command(
    examples="""\
  customer-manager customer update 1 --name "Acme Corp"
  customer-manager customer update 1 --name "Acme" --email billing@acme.test""",
)
@click.argument("customer_id", type=int)
@_payload_options
@click.pass_obj
def update(
    app: AppContext,
    customer_id: int,
    name: str,
    email: str | None,
    phone: str | None,
    address: str | None,
) -> None:
    """Replace a customer record.

    Every field is rewritten: options left out are stored as empty (NULL).
    """
    op = "update_customer"
    record = CustomerRecord(id=customer_id, name=name, email=email, phone=phone, address=address)

    async def _work(store: Store) -> ServiceResult:
        async with store.session() as session:
            row = await CustomerService(session).update_customer(customer_from_record(record))
            return ServiceResult(ok=True, op=op, data=CustomerRecord.model_validate(row).to_data())

    app.emit(app.run(op, _work))


@customer.command(
    examples="""\
  customer-manager customer delete 1""",
)
@click.argument("customer_id", type=int)
@click.pass_obj
def delete(app: AppContext, customer_id: int) -> None:
    """Delete a customer by ID (no-op if it does not exist)."""
    op = "delete_customer"

    async def _work(store: Store) -> ServiceResult:
        async with store.session() as session:
            await CustomerService(session).delete_customer(customer_id)
        return ServiceResult(ok=True, op=op, data={"id": customer_id})

    app.emit(app.run(op, _work))
