"""
Front panel state machine.

The controller subscribes to the door and the three buttons, keeps the
operating mode plus the accumulated power level and cook time, and drives the
light, the display and the cook controller. Every (mode, event) pair has an
outcome; inputs that mean nothing in the current mode are logged and ignored.
"""
from __future__ import annotations

import logging
import threading
from typing import Optional, Protocol

from .devices.button import Button
from .devices.door import Door
from .state import CookTime, OperatingMode

logger = logging.getLogger(__name__)

DEFAULT_POWER_STEP = 50
DEFAULT_MAX_POWER = 700


class Light(Protocol):
    def turn_on(self) -> None: ...

    def turn_off(self) -> None: ...


class Display(Protocol):
    def show_power(self, power: int) -> None: ...

    def show_time(self, minutes: int, seconds: int) -> None: ...

    def clear(self) -> None: ...


class CookController(Protocol):
    def start_cooking(self, power: int, duration_seconds: int) -> None: ...

    def stop(self) -> None: ...


class UserInterfaceController:
    """Sequences panel inputs into light, display and cooking commands."""

    def __init__(
        self,
        *,
        power_button: Button,
        time_button: Button,
        start_cancel_button: Button,
        door: Door,
        display: Display,
        light: Light,
        cook_controller: CookController,
        power_step: int = DEFAULT_POWER_STEP,
        max_power: int = DEFAULT_MAX_POWER,
    ) -> None:
        self._display = display
        self._light = light
        self._cook_controller = cook_controller
        self.power_step = power_step
        self.max_power = max_power

        # Events may arrive from the timer as well as from the inputs.
        self._lock = threading.RLock()
        self._mode = OperatingMode.READY
        self._power: Optional[int] = None
        self._time: Optional[CookTime] = None

        power_button.register_callback(self.on_power_pressed)
        time_button.register_callback(self.on_time_pressed)
        start_cancel_button.register_callback(self.on_start_cancel_pressed)
        door.register_callbacks(on_opened=self.on_door_opened, on_closed=self.on_door_closed)

    @property
    def mode(self) -> OperatingMode:
        return self._mode

    @property
    def power(self) -> Optional[int]:
        return self._power

    @property
    def cook_time(self) -> Optional[CookTime]:
        return self._time

    def on_door_opened(self) -> None:
        with self._lock:
            previous = self._mode
            match previous:
                case OperatingMode.DOOR_OPEN:
                    self._ignore("door opened")
                    return
                case OperatingMode.COOKING:
                    self._cook_controller.stop()
                    # Light is already on while cooking.
                case OperatingMode.READY | OperatingMode.SET_POWER | OperatingMode.SET_TIME:
                    self._light.turn_on()
            self._display.clear()
            self._reset_values()
            self._transition(OperatingMode.DOOR_OPEN)

    def on_door_closed(self) -> None:
        with self._lock:
            match self._mode:
                case OperatingMode.DOOR_OPEN:
                    self._light.turn_off()
                    self._transition(OperatingMode.READY)
                case _:
                    self._ignore("door closed")

    def on_power_pressed(self) -> None:
        with self._lock:
            match self._mode:
                case OperatingMode.READY:
                    self._power = self.power_step
                    self._display.show_power(self._power)
                    self._transition(OperatingMode.SET_POWER)
                case OperatingMode.SET_POWER:
                    self._power = self._next_power(self._power)
                    self._display.show_power(self._power)
                case OperatingMode.SET_TIME | OperatingMode.COOKING | OperatingMode.DOOR_OPEN:
                    self._ignore("power pressed")

    def on_time_pressed(self) -> None:
        with self._lock:
            match self._mode:
                case OperatingMode.SET_POWER:
                    self._time = CookTime(minutes=1)
                    self._display.show_time(self._time.minutes, self._time.seconds)
                    self._transition(OperatingMode.SET_TIME)
                case OperatingMode.SET_TIME:
                    self._time = self._time.add_minute()
                    self._display.show_time(self._time.minutes, self._time.seconds)
                case OperatingMode.READY | OperatingMode.COOKING | OperatingMode.DOOR_OPEN:
                    self._ignore("time pressed")

    def on_start_cancel_pressed(self) -> None:
        with self._lock:
            match self._mode:
                case OperatingMode.SET_POWER:
                    self._light.turn_off()
                    self._display.clear()
                    self._reset_values()
                    self._transition(OperatingMode.READY)
                case OperatingMode.SET_TIME:
                    # A refused start leaves the panel untouched in SET_TIME
                    self._cook_controller.start_cooking(self._power, self._time.total_seconds)
                    self._light.turn_on()
                    self._transition(OperatingMode.COOKING)
                case OperatingMode.COOKING:
                    self._cook_controller.stop()
                    self._light.turn_off()
                    self._display.clear()
                    self._reset_values()
                    self._transition(OperatingMode.READY)
                case OperatingMode.READY | OperatingMode.DOOR_OPEN:
                    self._ignore("start/cancel pressed")

    def cooking_is_done(self) -> None:
        """Called by the cook controller when a cycle runs to completion."""
        with self._lock:
            match self._mode:
                case OperatingMode.COOKING:
                    self._display.clear()
                    self._light.turn_off()
                    self._reset_values()
                    self._transition(OperatingMode.READY)
                case _:
                    self._ignore("cooking done")

    def _next_power(self, power: int) -> int:
        power += self.power_step
        return power if power <= self.max_power else self.power_step

    def _reset_values(self) -> None:
        self._power = None
        self._time = None

    def _transition(self, mode: OperatingMode) -> None:
        logger.info("Panel mode %s -> %s", self._mode.value, mode.value)
        self._mode = mode

    def _ignore(self, event: str) -> None:
        logger.debug("Ignored %s in mode %s", event, self._mode.value)


__all__ = ["UserInterfaceController", "Light", "Display", "CookController"]
