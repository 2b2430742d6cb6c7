import logging
import sys
from pathlib import Path

LOGGER_NAME = "scrape_ops"

FILE_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"


def setup_logging(
    log_file: Path, console_level: str = "INFO", file_level: str = "DEBUG"
) -> logging.Logger:
    """
    Setup dual logging: console (brief) + file (detailed)

    The file lives in the scratch directory and is only opened on the first
    record, so clearing the directory before anything is logged leaves no
    stale handle behind.

    Console levels:
    - INFO: Export/import progress (default)
    - WARNING: Only warnings/errors
    - DEBUG: Everything (verbose)
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(log_file, encoding="utf-8", delay=True)
    file_handler.setLevel(getattr(logging, file_level))
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, console_level))
    console_handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger
