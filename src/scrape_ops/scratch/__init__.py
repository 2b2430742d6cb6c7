"""Scratch space holding the state files between runs.

The scratch directory keeps ``status.json`` and ``updated.json`` so that an
external monitor can read the current state without talking to the process.
"""

from scrape_ops.scratch.space import DEFAULT_STATUS, ScratchSpace

__all__ = [
    "DEFAULT_STATUS",
    "ScratchSpace",
]
