"""Output primitives for the CLI.

All text that ends up in the CI job log goes through these helpers so tests can
capture it with click's CliRunner.
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a line to stdout, where the CI runner collects the job log."""
    click.echo(message, nl=nl)


def error_output(message: str = "") -> None:
    """Write a line to stderr."""
    click.echo(message, err=True)
