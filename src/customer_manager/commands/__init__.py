"""Subcommand modules for customer-manager.

Provides register_commands() which uses deferred imports to keep
``customer-manager --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the customer group and the schema commands on the root CLI group."""
    from customer_manager.commands.customer import customer
    from customer_manager.commands.init_cmd import init_cmd
    from customer_manager.commands.upgrade import upgrade

    cli.add_command(customer)
    cli.add_command(init_cmd)
    cli.add_command(upgrade)
