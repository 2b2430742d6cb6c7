"""Configuration loaded from environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path

from scrape_ops.version import PRODUCT_NAME

PACKAGE_DIR = Path(__file__).resolve().parent


@dataclass(frozen=True)
class OpsConfig:
    """Configuration for the scratch space and the collection transfer tools.

    Every component receives this object at construction so tests can point
    the scratch directory at an isolated location.
    """

    db_name: str
    temp_dir: Path
    work_dir: Path
    status_file: str = "status.json"
    updated_file: str = "updated.json"
    export_tool: str = "mongoexport"
    import_tool: str = "mongoimport"
    product_name: str = PRODUCT_NAME
    debug: bool = False

    @staticmethod
    def from_env() -> "OpsConfig":
        """Load configuration from environment variables."""
        return OpsConfig(
            db_name=os.environ.get("SCRAPE_OPS_DB_NAME", PRODUCT_NAME),
            temp_dir=Path(os.environ.get("SCRAPE_OPS_TEMP_DIR", str(Path.cwd() / "tmp"))),
            work_dir=Path(os.environ.get("SCRAPE_OPS_WORK_DIR", str(PACKAGE_DIR))),
            status_file=os.environ.get("SCRAPE_OPS_STATUS_FILE", "status.json"),
            updated_file=os.environ.get("SCRAPE_OPS_UPDATED_FILE", "updated.json"),
            export_tool=os.environ.get("SCRAPE_OPS_EXPORT_TOOL", "mongoexport"),
            import_tool=os.environ.get("SCRAPE_OPS_IMPORT_TOOL", "mongoimport"),
            debug=os.environ.get("SCRAPE_OPS_DEBUG", "false").lower() == "true",
        )

    @property
    def log_file_name(self) -> str:
        """Name of the log file kept inside the scratch directory."""
        return f"{self.product_name}.log"
