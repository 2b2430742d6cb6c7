"""Scratch directory lifecycle and the JSON state files inside it."""

import asyncio
import json
import logging
import shutil
from collections.abc import Coroutine
from pathlib import Path
from typing import Any

from scrape_ops.config import OpsConfig
from scrape_ops.integrations.time.abc import Time

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "Idle"


def _write_record(path: Path, record: dict[str, Any]) -> None:
    path.write_text(json.dumps(record, separators=(",", ":")), encoding="utf-8")


def _read_record(path: Path) -> dict[str, Any] | None:
    if not path.exists():
        return None
    content = path.read_text(encoding="utf-8")
    # Placeholder files from create_temp() are empty until the first write
    if not content.strip():
        return None
    try:
        return json.loads(content)
    except json.JSONDecodeError:
        # Read while a setter was mid-write; no complete record yet
        return None


class ScratchSpace:
    """Owns the scratch directory and the status/updated state files.

    The directory is cleared on create_temp() but never removed. State files
    are overwritten wholesale on every update, with no locking and no atomic
    rename: concurrent setters race and the last write wins.

    The setters schedule their write on the running event loop and return the
    task without waiting for it. Callers that need the write to have landed
    await the task or call flush(). Failures surface on the task, in flush()
    and in the log; they never raise into the setter's caller.
    """

    def __init__(self, config: OpsConfig, time: Time) -> None:
        """Create ScratchSpace.

        Args:
            config: Configuration providing the scratch path and file names
            time: Clock used for the default last-updated value
        """
        self._config = config
        self._time = time
        self._pending: set[asyncio.Task[None]] = set()
        self._failures: list[BaseException] = []

    @property
    def root(self) -> Path:
        return self._config.temp_dir

    @property
    def status_path(self) -> Path:
        return self.root / self._config.status_file

    @property
    def updated_path(self) -> Path:
        return self.root / self._config.updated_file

    @property
    def log_path(self) -> Path:
        return self.root / self._config.log_file_name

    def create_temp(self) -> None:
        """Reset the scratch directory to a clean state.

        Creates the directory if needed, deletes everything inside it
        (nested directories included) and leaves two empty state files.

        Raises:
            OSError: If the directory cannot be created or cleared
        """
        self.root.mkdir(parents=True, exist_ok=True)
        self._clear(self.root)

        self.status_path.write_bytes(b"")
        self.updated_path.write_bytes(b"")

    def _clear(self, directory: Path) -> None:
        for entry in directory.iterdir():
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()

    def reset_log(self) -> None:
        """Delete the log file inside the scratch directory if present."""
        if self.log_path.exists():
            self.log_path.unlink()

    async def write_status(self, status: str = DEFAULT_STATUS) -> None:
        """Overwrite status.json with ``{"status": status}``."""
        await asyncio.to_thread(_write_record, self.status_path, {"status": status})

    async def write_last_updated(self, updated: int) -> None:
        """Overwrite updated.json with ``{"updated": updated}``."""
        await asyncio.to_thread(_write_record, self.updated_path, {"updated": updated})

    def set_status(self, status: str = DEFAULT_STATUS) -> asyncio.Task[None]:
        """Schedule a status update without waiting for it.

        Must be called with an event loop running.

        Returns:
            Task completing when the file has been written
        """
        return self._schedule(self.write_status(status))

    def set_last_updated(self, updated: int | None = None) -> asyncio.Task[None]:
        """Schedule a last-updated update without waiting for it.

        Args:
            updated: Epoch seconds to record; the current time when None.
                The default is taken when this method is called, not when
                the write runs.

        Returns:
            Task completing when the file has been written
        """
        if updated is None:
            updated = self._time.epoch_seconds()
        return self._schedule(self.write_last_updated(updated))

    async def flush(self) -> None:
        """Wait for every pending state write.

        Failures of writes that settled before this call are reported too.
        Each failure is raised by one flush() only.

        Raises:
            OSError: The first write failure since the previous flush()
        """
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
        failures, self._failures = self._failures, []
        if failures:
            raise failures[0]

    def read_status(self) -> str | None:
        """Current status label, or None before the first write."""
        record = _read_record(self.status_path)
        if record is None:
            return None
        return record["status"]

    def read_last_updated(self) -> int | None:
        """Last-updated epoch seconds, or None before the first write."""
        record = _read_record(self.updated_path)
        if record is None:
            return None
        return record["updated"]

    def _schedule(self, write: Coroutine[Any, Any, None]) -> asyncio.Task[None]:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            write.close()
            raise
        task = loop.create_task(write)
        # Hold a reference so the task is not collected before it finishes
        self._pending.add(task)
        task.add_done_callback(self._on_write_done)
        return task

    def _on_write_done(self, task: asyncio.Task[None]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            self._failures.append(error)
            logger.error("Failed to write state file: %s", error)
