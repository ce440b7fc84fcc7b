"""Typed registry used to hand resolved contexts between stages."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from .errors import FatalWiringError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ContextBus:
    """Per-run store of published context objects, keyed by type."""

    def __init__(self) -> None:
        self._items: dict[type, Any] = {}

    def publish(self, key: type[T], value: T) -> None:
        self._items[key] = value
        logger.debug(f"Published context: '{key.__name__}'")

    def get(self, key: type[T]) -> T:
        if key not in self._items:
            raise FatalWiringError(f"Context '{key.__name__}' has not been published")
        logger.debug(f"Loaded context: '{key.__name__}'")
        return self._items[key]
