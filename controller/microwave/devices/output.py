"""Text sink shared by the panel's output devices."""
from __future__ import annotations

import asyncio
import logging
from asyncio import QueueEmpty
from typing import List

from ..state import PanelEvent

logger = logging.getLogger(__name__)


class Output:
    """Logs every device line and fans it out to UI subscriber queues."""

    def __init__(self, *, queue_size: int = 32) -> None:
        self.queue_size = queue_size
        self._ui_subscribers: List[asyncio.Queue[PanelEvent]] = []

    def register_ui(self) -> asyncio.Queue[PanelEvent]:
        queue: asyncio.Queue[PanelEvent] = asyncio.Queue(maxsize=self.queue_size)
        self._ui_subscribers.append(queue)
        return queue

    def unregister_ui(self, queue: asyncio.Queue[PanelEvent]) -> None:
        if queue in self._ui_subscribers:
            self._ui_subscribers.remove(queue)

    def output_line(self, source: str, line: str, **data: object) -> None:
        logger.info("[%s] %s", source, line)
        self._broadcast(PanelEvent(type=source, data={"line": line, **data}))

    def _broadcast(self, event: PanelEvent) -> None:
        """Push to every subscriber, dropping the oldest event when a queue is full."""
        for queue in list(self._ui_subscribers):
            try:
                if queue.full():
                    try:
                        queue.get_nowait()
                    except QueueEmpty:
                        pass
                queue.put_nowait(event)
            except Exception as e:
                logger.warning("Failed to broadcast event to subscriber: %s", e)
