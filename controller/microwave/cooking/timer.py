"""Countdown timer driving a cook cycle."""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Optional

logger = logging.getLogger(__name__)

TickCallback = Callable[[int], None]
ExpiredCallback = Callable[[], None]


class Timer:
    """Async countdown in whole seconds; one tick every ``tick_seconds``."""

    def __init__(self, *, tick_seconds: float = 1.0) -> None:
        self.tick_seconds = tick_seconds
        self._remaining = 0
        self._task: Optional[asyncio.Task[None]] = None
        self._tick_callbacks: list[TickCallback] = []
        self._expired_callbacks: list[ExpiredCallback] = []

    @property
    def time_remaining(self) -> int:
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def register_callbacks(
        self,
        *,
        on_tick: TickCallback | None = None,
        on_expired: ExpiredCallback | None = None,
    ) -> None:
        if on_tick is not None:
            self._tick_callbacks.append(on_tick)
        if on_expired is not None:
            self._expired_callbacks.append(on_expired)

    def start(self, seconds: int) -> None:
        """Must be called from the event loop thread."""
        if seconds <= 0:
            raise ValueError(f"Timer needs a positive duration, got {seconds}")
        self.stop()
        self._remaining = seconds
        self._task = asyncio.get_running_loop().create_task(self._run_loop(), name="cook-timer")
        logger.debug("Timer started (%ds, tick=%.3fs)", seconds, self.tick_seconds)

    def stop(self) -> None:
        if self._task is None:
            return
        task, self._task = self._task, None
        if task is not asyncio.current_task():
            task.cancel()
        logger.debug("Timer stopped with %ds remaining", self._remaining)

    async def _run_loop(self) -> None:
        this_task = asyncio.current_task()
        try:
            while self._remaining > 0:
                await asyncio.sleep(self.tick_seconds)
                self._remaining -= 1
                self._emit_tick(self._remaining)
                # A tick callback may have stopped or restarted the timer.
                if self._task is not this_task:
                    return
            self._task = None
            self._emit_expired()
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            logger.exception("Timer error: %s", exc)
            raise

    def _emit_tick(self, remaining: int) -> None:
        for callback in self._tick_callbacks:
            try:
                callback(remaining)
            except Exception:
                logger.exception("Timer tick callback failed")

    def _emit_expired(self) -> None:
        for callback in self._expired_callbacks:
            try:
                callback()
            except Exception:
                logger.exception("Timer expired callback failed")
