"""Stateless panel button."""
from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

PressCallback = Callable[[], None]


class Button:
    """Emits a press to every registered callback. Never refuses a press."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._callbacks: list[PressCallback] = []

    def register_callback(self, callback: PressCallback) -> None:
        self._callbacks.append(callback)

    def press(self) -> None:
        logger.debug("Button %s pressed", self.name)
        for callback in self._callbacks:
            try:
                callback()
            except Exception:
                logger.exception("Button %s callback failed", self.name)
