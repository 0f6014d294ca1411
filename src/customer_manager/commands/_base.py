"""Click base classes that add an ``--examples`` flag.

``--help`` stays short; ``customer-manager <command> --examples`` prints
ready-to-paste invocations and exits before any argument is validated, so
commands with required arguments still show their examples.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Stores ``examples`` and registers the eager ``--examples`` option."""

    examples: str | None
    params: list[click.Parameter]

    def _setup_examples(self, examples: str | None) -> None:
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or not self.examples:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class CmCommand(_ExamplesMixin, click.Command):
    """Command accepting ``examples=`` in its decorator."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._setup_examples(examples)


class CmGroup(_ExamplesMixin, click.Group):
    """Group accepting ``examples=``; its subcommands default to :class:`CmCommand`."""

    command_class = CmCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._setup_examples(examples)
