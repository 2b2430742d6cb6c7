"""Static CLI definition for scrape-ops."""

import click

from scrape_ops.cli.commands.scratch import (
    mark_updated_command,
    reset_command,
    reset_log_command,
    set_status_command,
    status_command,
)
from scrape_ops.cli.commands.transfer import export_command, import_command
from scrape_ops.context import OpsContext, create_context
from scrape_ops.logging_config import setup_logging
from scrape_ops.version import PRODUCT_NAME, __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(name="scrape-ops", context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name=PRODUCT_NAME)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging on the console.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Maintain the scratch directory and move collections in and out of the database."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()

    ops: OpsContext = ctx.obj
    console_level = "DEBUG" if verbose or ops.config.debug else "INFO"
    setup_logging(ops.config.temp_dir / ops.config.log_file_name, console_level=console_level)


# Register all commands
cli.add_command(reset_command)
cli.add_command(reset_log_command)
cli.add_command(status_command)
cli.add_command(set_status_command)
cli.add_command(mark_updated_command)
cli.add_command(export_command)
cli.add_command(import_command)


def main() -> None:
    """CLI entry point used by the `scrape-ops` console script."""
    cli()
