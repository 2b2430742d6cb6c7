"""Operations context for dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from scrape_ops.config import OpsConfig
from scrape_ops.integrations.process_runner.abc import ProcessRunner
from scrape_ops.integrations.process_runner.fake import FakeProcessRunner
from scrape_ops.integrations.process_runner.real import RealProcessRunner
from scrape_ops.integrations.time.abc import Time
from scrape_ops.integrations.time.fake import FakeTime
from scrape_ops.integrations.time.real import RealTime


@dataclass(frozen=True)
class OpsContext:
    """Context containing the configuration and all injected integrations.

    Created once at the entry point and handed to the services. Use
    for_test() for testing scenarios.
    """

    config: OpsConfig
    process_runner: ProcessRunner
    time: Time

    @classmethod
    def for_test(
        cls,
        *,
        temp_dir: Path,
        work_dir: Path | None = None,
        db_name: str = "test-db",
        outputs: dict[str, str] | None = None,
        should_fail: bool = False,
        now: int = 1_700_000_000,
    ) -> "OpsContext":
        """Create a test context with fake implementations.

        Args:
            temp_dir: Scratch directory, usually under pytest's tmp_path
            work_dir: Working directory recorded for commands (defaults to temp_dir)
            db_name: Database name used in built commands
            outputs: Pre-configured command outputs for FakeProcessRunner
            should_fail: If True, FakeProcessRunner fails every command
            now: Epoch seconds returned by FakeTime

        Returns:
            OpsContext with fake implementations
        """
        config = OpsConfig(
            db_name=db_name,
            temp_dir=temp_dir,
            work_dir=work_dir if work_dir is not None else temp_dir,
        )
        return cls(
            config=config,
            process_runner=FakeProcessRunner(outputs=outputs, should_fail=should_fail),
            time=FakeTime(now=now),
        )


def create_context(config: OpsConfig | None = None) -> OpsContext:
    """Create the production context with real implementations.

    Args:
        config: Explicit configuration; loaded from the environment when None
    """
    return OpsContext(
        config=config if config is not None else OpsConfig.from_env(),
        process_runner=RealProcessRunner(),
        time=RealTime(),
    )
