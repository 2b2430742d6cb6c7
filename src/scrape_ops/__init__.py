"""Operational utilities for scraping services.

Manages the scratch directory and its state files, and moves database
collections in and out through the external export/import tools.
"""

from scrape_ops.config import OpsConfig
from scrape_ops.context import OpsContext, create_context
from scrape_ops.helpers import ScrapeOpsError, on_error, search
from scrape_ops.scratch import ScratchSpace
from scrape_ops.services.collection_transfer import CollectionTransfer
from scrape_ops.version import PRODUCT_NAME, __version__

__all__ = [
    "CollectionTransfer",
    "OpsConfig",
    "OpsContext",
    "PRODUCT_NAME",
    "ScrapeOpsError",
    "ScratchSpace",
    "__version__",
    "create_context",
    "on_error",
    "search",
]
