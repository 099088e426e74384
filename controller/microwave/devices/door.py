"""Door sensor with open/close notifications."""
from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

DoorCallback = Callable[[], None]


class Door:
    """Two-state door sensor. Repeating the current state notifies nobody."""

    def __init__(self) -> None:
        self._is_open = False
        self._opened_callbacks: list[DoorCallback] = []
        self._closed_callbacks: list[DoorCallback] = []

    @property
    def is_open(self) -> bool:
        return self._is_open

    def register_callbacks(
        self,
        *,
        on_opened: DoorCallback | None = None,
        on_closed: DoorCallback | None = None,
    ) -> None:
        if on_opened is not None:
            self._opened_callbacks.append(on_opened)
        if on_closed is not None:
            self._closed_callbacks.append(on_closed)

    def open(self) -> None:
        if self._is_open:
            logger.debug("Door already open")
            return
        self._is_open = True
        logger.info("Door opened")
        self._emit(self._opened_callbacks, "opened")

    def close(self) -> None:
        if not self._is_open:
            logger.debug("Door already closed")
            return
        self._is_open = False
        logger.info("Door closed")
        self._emit(self._closed_callbacks, "closed")

    @staticmethod
    def _emit(callbacks: list[DoorCallback], event: str) -> None:
        for callback in callbacks:
            try:
                callback()
            except Exception:
                logger.exception("Door %s callback failed", event)
