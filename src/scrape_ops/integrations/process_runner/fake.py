"""In-memory fake implementation of ProcessRunner for testing."""

import subprocess
from dataclasses import dataclass
from pathlib import Path

from scrape_ops.integrations.process_runner.abc import ProcessRunner
from scrape_ops.integrations.process_runner.real import collapse_output


@dataclass(frozen=True)
class ExecuteCall:
    """A recorded execute() invocation."""

    command: str
    cwd: Path


class FakeProcessRunner(ProcessRunner):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    This class has NO public setup methods.
    """

    def __init__(
        self,
        *,
        outputs: dict[str, str] | None = None,
        default_output: str = "",
        should_fail: bool = False,
        failure_returncode: int = 1,
        failure_stderr: str = "Simulated command failure",
    ) -> None:
        """Create FakeProcessRunner with pre-configured outputs.

        Args:
            outputs: Mapping of command -> raw stdout to return
            default_output: Raw stdout when the command is not in outputs
            should_fail: If True, every call raises CalledProcessError
            failure_returncode: Exit code reported when should_fail=True
            failure_stderr: stderr attached to the raised error
        """
        self._outputs = outputs or {}
        self._default_output = default_output
        self._should_fail = should_fail
        self._failure_returncode = failure_returncode
        self._failure_stderr = failure_stderr
        self._execute_calls: list[ExecuteCall] = []

    @property
    def execute_calls(self) -> list[ExecuteCall]:
        """Read-only access to executed commands for test assertions."""
        return self._execute_calls.copy()

    async def execute(self, command: str, cwd: Path) -> str:
        """Record the call and return the canned output."""
        self._execute_calls.append(ExecuteCall(command=command, cwd=cwd))

        if self._should_fail:
            raise subprocess.CalledProcessError(
                returncode=self._failure_returncode,
                cmd=command,
                output="",
                stderr=self._failure_stderr,
            )

        return collapse_output(self._outputs.get(command, self._default_output))
