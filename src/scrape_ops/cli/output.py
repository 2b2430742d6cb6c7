"""Output helpers separating messages for people from data for scripts."""

import click


def user_output(message: str) -> None:
    """Status and progress messages, written to stderr."""
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    """Command results, written to stdout so they can be piped."""
    click.echo(message)
