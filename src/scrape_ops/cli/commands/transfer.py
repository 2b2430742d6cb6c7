"""Commands exporting and importing collections."""

import asyncio
import subprocess
from collections.abc import Coroutine
from typing import Any

import click

from scrape_ops.cli.output import machine_output, user_output
from scrape_ops.context import OpsContext
from scrape_ops.helpers import ScrapeOpsError, on_error
from scrape_ops.services.collection_transfer import CollectionTransfer


def _transfer(ctx: click.Context) -> CollectionTransfer:
    ops: OpsContext = ctx.obj
    return CollectionTransfer(ops.config, ops.process_runner)


def _fail(message: str) -> SystemExit:
    """Log the failure and report it to the user."""
    on_error(message)
    user_output(f"✗ {message}")
    return SystemExit(1)


def _run_tool(operation: Coroutine[Any, Any, str]) -> str:
    """Run a transfer and turn its failures into a non-zero exit."""
    try:
        return asyncio.run(operation)
    except FileNotFoundError as e:
        raise _fail(str(e)) from e
    except subprocess.CalledProcessError as e:
        message = f"Command failed with exit code {e.returncode}: {e.cmd}"
        if e.stderr and e.stderr.strip():
            message += f"\n  stderr: {e.stderr.strip()}"
        raise _fail(message) from e
    except ScrapeOpsError as e:
        user_output(f"✗ {e}")
        raise SystemExit(1) from e


@click.command("export")
@click.argument("collection")
@click.pass_context
def export_command(ctx: click.Context, collection: str) -> None:
    """Export COLLECTION (singular name) into the scratch directory."""
    transfer = _transfer(ctx)
    output = _run_tool(transfer.export_collection(collection))
    if output:
        machine_output(output)
    user_output(f"✓ Exported to {transfer.export_path(collection)}")


@click.command("import")
@click.argument("collection")
@click.argument("json_file", type=click.Path(dir_okay=False))
@click.pass_context
def import_command(ctx: click.Context, collection: str, json_file: str) -> None:
    """Import JSON_FILE into COLLECTION (singular name), upserting documents."""
    transfer = _transfer(ctx)
    output = _run_tool(transfer.import_collection(collection, json_file))
    if output:
        machine_output(output)
    user_output(f"✓ Imported {json_file} into {collection}s")
