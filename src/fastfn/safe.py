"""Invocation that returns failures instead of raising them."""

from __future__ import annotations

import logging
from typing import Any, Callable

from .errors import normalize_failure

logger = logging.getLogger(__name__)


def try_(fn: Callable[[], Any]):
    """Call ``fn()`` and return its result, or the failure it raised.

    Successful results are returned untouched, so a callable that returns
    an exception object looks the same as one that raised it. Only
    ``Exception`` subclasses are captured.
    """
    try:
        return fn()
    except Exception as exc:
        logger.debug("captured failure from %r: %s", fn, exc)
        return normalize_failure(exc)
