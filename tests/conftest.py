"""Pytest configuration and fixtures."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from scrape_ops.context import OpsContext
from scrape_ops.integrations.process_runner.fake import FakeProcessRunner
from scrape_ops.integrations.time.fake import FakeTime
from scrape_ops.logging_config import LOGGER_NAME
from scrape_ops.scratch import ScratchSpace
from scrape_ops.services.collection_transfer import CollectionTransfer

FIXED_NOW = 1_700_000_000


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by the CLI so they don't leak between tests."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Scratch directory location (not created yet)."""
    return tmp_path / "scratch"


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Directory the external tools run in."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def ops_context(temp_dir: Path, work_dir: Path) -> OpsContext:
    """Create an OpsContext with fake implementations."""
    return OpsContext.for_test(temp_dir=temp_dir, work_dir=work_dir, now=FIXED_NOW)


@pytest.fixture
def fake_time() -> FakeTime:
    """Create a FakeTime frozen at FIXED_NOW."""
    return FakeTime(now=FIXED_NOW)


@pytest.fixture
def fake_process_runner() -> FakeProcessRunner:
    """Create a fresh FakeProcessRunner."""
    return FakeProcessRunner()


@pytest.fixture
def scratch(ops_context: OpsContext, fake_time: FakeTime) -> ScratchSpace:
    """Create a ScratchSpace over the test scratch directory."""
    return ScratchSpace(ops_context.config, fake_time)


@pytest.fixture
def transfer(ops_context: OpsContext, fake_process_runner: FakeProcessRunner) -> CollectionTransfer:
    """Create a CollectionTransfer backed by the fake runner."""
    return CollectionTransfer(ops_context.config, fake_process_runner)
