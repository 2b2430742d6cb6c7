"""Shell command execution integration."""

from scrape_ops.integrations.process_runner.abc import ProcessRunner
from scrape_ops.integrations.process_runner.fake import ExecuteCall, FakeProcessRunner
from scrape_ops.integrations.process_runner.real import RealProcessRunner, collapse_output

__all__ = [
    "ExecuteCall",
    "FakeProcessRunner",
    "ProcessRunner",
    "RealProcessRunner",
    "collapse_output",
]
