"""Tests for the --examples flag on every command."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from customer_manager.cli import cli


@pytest.mark.parametrize(
    "args",
    [
        ["customer"],
        ["customer", "list"],
        ["customer", "get"],
        ["customer", "create"],
        ["customer", "update"],
        ["customer", "delete"],
        ["init"],
        ["upgrade"],
    ],
)
def test_examples_flag(cli_runner: CliRunner, args: list[str]) -> None:
    result = cli_runner.invoke(cli, [*args, "--examples"])
    assert result.exit_code == 0
    assert f"Examples for 'cli {' '.join(args)}'" in result.output
    assert "customer-manager" in result.output


def test_help_does_not_inline_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["customer", "create", "--help"])
    assert result.exit_code == 0
    assert "--examples" in result.output
    assert "customer-manager customer create --id 7" not in result.output
