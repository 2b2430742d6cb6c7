"""Real process runner using asyncio subprocesses."""

import asyncio
import subprocess
from pathlib import Path

from scrape_ops.integrations.process_runner.abc import ProcessRunner


def collapse_output(output: str) -> str:
    """Drop every newline so multi-line output becomes one line."""
    return output.replace("\n", "")


class RealProcessRunner(ProcessRunner):
    """Production implementation running commands through the shell.

    Each call spawns an independent child process; nothing is shared between
    concurrent calls. There is no timeout and no retry.
    """

    async def execute(self, command: str, cwd: Path) -> str:
        process = await asyncio.create_subprocess_shell(
            command,
            cwd=cwd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()

        stdout_text = stdout.decode("utf-8", errors="replace")
        # A negative return code means the child was killed by a signal
        if process.returncode != 0:
            raise subprocess.CalledProcessError(
                returncode=process.returncode if process.returncode is not None else -1,
                cmd=command,
                output=stdout_text,
                stderr=stderr.decode("utf-8", errors="replace"),
            )

        return collapse_output(stdout_text)
