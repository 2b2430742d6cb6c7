"""Commands managing the scratch directory and its state files."""

import asyncio
from datetime import UTC, datetime

import click

from scrape_ops.cli.output import machine_output, user_output
from scrape_ops.context import OpsContext
from scrape_ops.scratch import DEFAULT_STATUS, ScratchSpace


def _scratch(ctx: click.Context) -> ScratchSpace:
    ops: OpsContext = ctx.obj
    return ScratchSpace(ops.config, ops.time)


@click.command("reset")
@click.pass_context
def reset_command(ctx: click.Context) -> None:
    """Clear the scratch directory and recreate empty state files."""
    scratch = _scratch(ctx)
    scratch.create_temp()
    user_output(f"✓ Scratch directory reset: {scratch.root}")


@click.command("reset-log")
@click.pass_context
def reset_log_command(ctx: click.Context) -> None:
    """Delete the log file kept in the scratch directory."""
    scratch = _scratch(ctx)
    existed = scratch.log_path.exists()
    scratch.reset_log()
    if existed:
        user_output(f"✓ Removed {scratch.log_path.name}")
    else:
        user_output(f"No log file at {scratch.log_path}")


@click.command("status")
@click.pass_context
def status_command(ctx: click.Context) -> None:
    """Show the current status and when the last scrape finished."""
    scratch = _scratch(ctx)
    status = scratch.read_status()
    updated = scratch.read_last_updated()

    machine_output(f"status: {status if status is not None else 'unknown'}")
    if updated is None:
        machine_output("updated: unknown")
    else:
        stamp = datetime.fromtimestamp(updated, UTC).isoformat()
        machine_output(f"updated: {updated} ({stamp})")


@click.command("set-status")
@click.argument("status", default=DEFAULT_STATUS)
@click.pass_context
def set_status_command(ctx: click.Context, status: str) -> None:
    """Record STATUS as the current operation (default: Idle)."""
    scratch = _scratch(ctx)
    asyncio.run(scratch.write_status(status))
    user_output(f"✓ Status set to {status}")


@click.command("mark-updated")
@click.option("--at", "updated", type=int, default=None, help="Epoch seconds (default: now).")
@click.pass_context
def mark_updated_command(ctx: click.Context, updated: int | None) -> None:
    """Record the time of the last successful scrape."""
    ops: OpsContext = ctx.obj
    scratch = _scratch(ctx)
    if updated is None:
        updated = ops.time.epoch_seconds()
    asyncio.run(scratch.write_last_updated(updated))
    user_output(f"✓ Last updated set to {updated}")
