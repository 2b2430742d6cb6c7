"""Tests for FakeProcessRunner implementation."""

import subprocess
from pathlib import Path

import pytest
from scrape_ops.integrations.process_runner.fake import ExecuteCall, FakeProcessRunner


class TestFakeProcessRunner:
    """Tests for the FakeProcessRunner fake implementation."""

    @pytest.fixture
    def runner(self) -> FakeProcessRunner:
        """Provide a fresh FakeProcessRunner for each test."""
        return FakeProcessRunner()

    async def test_execute_returns_default_output(self, runner: FakeProcessRunner) -> None:
        """Without configured output an empty string is returned."""
        result = await runner.execute("mongoexport -d db", cwd=Path("/work"))

        assert result == ""

    async def test_execute_records_call(self, runner: FakeProcessRunner) -> None:
        """Executing records the command and directory."""
        await runner.execute("mongoexport -d db", cwd=Path("/work"))

        assert runner.execute_calls == [ExecuteCall(command="mongoexport -d db", cwd=Path("/work"))]

    async def test_execute_with_configured_output(self) -> None:
        """Configured outputs are returned with newlines collapsed."""
        runner = FakeProcessRunner(outputs={"ls": "a\nb\n"}, default_output="other")

        assert await runner.execute("ls", cwd=Path("/")) == "ab"
        assert await runner.execute("pwd", cwd=Path("/")) == "other"

    async def test_should_fail_raises(self) -> None:
        """should_fail raises CalledProcessError but still records the call."""
        runner = FakeProcessRunner(should_fail=True, failure_returncode=2, failure_stderr="boom")

        with pytest.raises(subprocess.CalledProcessError) as exc_info:
            await runner.execute("mongoimport", cwd=Path("/work"))

        assert exc_info.value.returncode == 2
        assert exc_info.value.stderr == "boom"
        assert len(runner.execute_calls) == 1

    async def test_execute_calls_returns_copy(self, runner: FakeProcessRunner) -> None:
        """The execute_calls property returns a copy."""
        await runner.execute("echo", cwd=Path("/"))

        calls_copy = runner.execute_calls
        calls_copy.clear()

        assert len(runner.execute_calls) == 1


class TestExecuteCall:
    """Tests for the ExecuteCall dataclass."""

    def test_execute_call_is_frozen(self) -> None:
        """ExecuteCall is immutable."""
        call = ExecuteCall(command="echo", cwd=Path("/"))

        with pytest.raises(Exception):  # FrozenInstanceError
            call.command = "other"  # type: ignore[misc]
