"""Abstract interface for running external commands."""

from abc import ABC, abstractmethod
from pathlib import Path


class ProcessRunner(ABC):
    """Abstract interface for running one shell command to completion.

    Implementations include:
    - FakeProcessRunner: In-memory for testing
    - RealProcessRunner: asyncio subprocess for production
    """

    @abstractmethod
    async def execute(self, command: str, cwd: Path) -> str:
        """Run a shell command and return its standard output.

        Every newline in the output is removed, so multi-line output comes
        back as a single concatenated line.

        Args:
            command: Command line passed to the shell
            cwd: Working directory for the child process

        Returns:
            Standard output with newlines removed

        Raises:
            subprocess.CalledProcessError: If the command exits non-zero or is
                killed by a signal
            OSError: If the child process cannot be spawned
        """
        ...
