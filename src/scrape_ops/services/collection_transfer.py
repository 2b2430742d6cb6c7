"""Export and import of database collections through the external tools."""

import logging
import shlex
from pathlib import Path

from scrape_ops.config import OpsConfig
from scrape_ops.integrations.process_runner.abc import ProcessRunner

logger = logging.getLogger(__name__)


def pluralize(collection: str) -> str:
    """Collection names are singular for callers and plural in the database."""
    return f"{collection}s"


class CollectionTransfer:
    """Builds export/import commands for named collections and runs them.

    Collection names are not validated; they are interpolated into the
    command line as given.
    """

    def __init__(self, config: OpsConfig, process_runner: ProcessRunner) -> None:
        """Create CollectionTransfer.

        Args:
            config: Configuration with the database name, scratch path and tools
            process_runner: Runner executing the built commands
        """
        self._config = config
        self._process_runner = process_runner

    def export_path(self, collection: str) -> Path:
        """Scratch file an export of ``collection`` is written to."""
        return self._config.temp_dir / f"{pluralize(collection)}.json"

    def build_export_command(self, collection: str) -> str:
        return (
            f"{self._config.export_tool} -d {self._config.db_name} "
            f"-c {pluralize(collection)} -o {shlex.quote(str(self.export_path(collection)))}"
        )

    def build_import_command(self, collection: str, json_file: Path) -> str:
        return (
            f"{self._config.import_tool} -d {self._config.db_name} "
            f"-c {pluralize(collection)} --file {shlex.quote(str(json_file))} --upsert"
        )

    async def export_collection(self, collection: str) -> str:
        """Export a collection to ``<scratch>/<collection>s.json``.

        Args:
            collection: Singular collection name

        Returns:
            Output of the export tool, newlines removed

        Raises:
            subprocess.CalledProcessError: If the export tool fails
        """
        json_file = self.export_path(collection)
        logger.info("Exporting collection: '%s', to: '%s'", pluralize(collection), json_file)

        command = self.build_export_command(collection)
        return await self._process_runner.execute(command, cwd=self._config.work_dir)

    async def import_collection(self, collection: str, json_file: str | Path) -> str:
        """Import a JSON file into a collection, upserting documents.

        A relative ``json_file`` is resolved against the caller's current
        working directory, not the directory the tool runs in.

        Args:
            collection: Singular collection name
            json_file: File to import

        Returns:
            Output of the import tool, newlines removed

        Raises:
            FileNotFoundError: If json_file does not exist (no process is started)
            subprocess.CalledProcessError: If the import tool fails
        """
        path = Path(json_file)
        if not path.is_absolute():
            path = Path.cwd() / path
        if not path.exists():
            raise FileNotFoundError(f"Error: no such file found for '{path}'")

        logger.info("Importing collection: '%s', from: '%s'", collection, path)

        command = self.build_import_command(collection, path)
        return await self._process_runner.execute(command, cwd=self._config.work_dir)
