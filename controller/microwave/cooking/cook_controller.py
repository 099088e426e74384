"""Cook cycle sequencing: power tube, timer and the remaining-time readout."""
from __future__ import annotations

import logging
from typing import Optional, Protocol

from ..devices.display import Display
from .power_tube import PowerTube
from .timer import Timer

logger = logging.getLogger(__name__)


class CookingDoneListener(Protocol):
    def cooking_is_done(self) -> None: ...


class CookController:
    """Runs one cook cycle at a time and reports natural completion."""

    def __init__(
        self,
        *,
        timer: Timer,
        display: Display,
        power_tube: PowerTube,
        user_interface: Optional[CookingDoneListener] = None,
    ) -> None:
        self._timer = timer
        self._display = display
        self._power_tube = power_tube
        self.user_interface = user_interface
        self._is_cooking = False
        self._timer.register_callbacks(on_tick=self._on_timer_tick, on_expired=self._on_timer_expired)

    @property
    def is_cooking(self) -> bool:
        return self._is_cooking

    @property
    def time_remaining(self) -> int:
        return self._timer.time_remaining if self._is_cooking else 0

    def start_cooking(self, power: int, duration_seconds: int) -> None:
        self._power_tube.turn_on(power)
        try:
            self._timer.start(duration_seconds)
        except Exception:
            self._power_tube.turn_off()
            raise
        self._is_cooking = True
        logger.info("Cooking started: %d W for %ds", power, duration_seconds)

    def stop(self) -> None:
        if not self._is_cooking:
            return
        self._is_cooking = False
        self._timer.stop()
        self._power_tube.turn_off()
        logger.info("Cooking stopped with %ds remaining", self._timer.time_remaining)

    def _on_timer_tick(self, remaining: int) -> None:
        if not self._is_cooking:
            return
        self._display.show_time(remaining // 60, remaining % 60)

    def _on_timer_expired(self) -> None:
        if not self._is_cooking:
            return
        self._is_cooking = False
        self._power_tube.turn_off()
        logger.info("Cooking finished")
        if self.user_interface is not None:
            self.user_interface.cooking_is_done()
        else:
            logger.warning("Cooking finished with no user interface attached")
