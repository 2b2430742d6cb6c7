"""Small helpers shared by callers of the scratch space and transfer service."""

import logging
from collections.abc import Callable, Mapping
from typing import Any

logger = logging.getLogger(__name__)

_MISSING = object()


class ScrapeOpsError(Exception):
    """Domain error created through on_error()."""


def on_error(message: str) -> ScrapeOpsError:
    """Log an error message and build an exception carrying it.

    The exception is returned, not raised, so the caller decides whether to
    raise it, reject with it, or just keep the log line.

    Args:
        message: Error message to log and attach

    Returns:
        A new ScrapeOpsError with the given message
    """
    logger.error(message)
    return ScrapeOpsError(message)


def search(key: str, value: Any) -> Callable[[Any], bool]:
    """Build a predicate matching elements whose ``key`` field strictly equals ``value``.

    Mappings are looked up by key and other objects by attribute. An element
    without the field never matches.

    Example:
        >>> items = [{"status": "Idle"}, {"status": "Busy"}]
        >>> next(filter(search("status", "Idle"), items))
        {'status': 'Idle'}
    """

    def predicate(element: Any) -> bool:
        if isinstance(element, Mapping):
            field = element.get(key, _MISSING)
        else:
            field = getattr(element, key, _MISSING)
        if field is _MISSING:
            return False
        # Strict: True does not match 1
        return type(field) is type(value) and field == value

    return predicate
