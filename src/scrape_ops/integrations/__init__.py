"""Integrations with the operating system: clock and child processes."""
