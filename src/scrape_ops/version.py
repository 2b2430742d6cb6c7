"""Package metadata shared by the config layer and the CLI."""

PRODUCT_NAME = "scrape-ops"

__version__ = "0.1.0"
