"""Builds the panel devices and wires them to the controller."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .config import Settings, get_settings
from .cooking import CookController, PowerTube, Timer
from .devices import Button, Display, Door, Light, Output
from .state import OperatingMode
from .user_interface import UserInterfaceController

logger = logging.getLogger(__name__)

POWER_BUTTON = "power"
TIME_BUTTON = "time"
START_CANCEL_BUTTON = "start-cancel"


class UnknownButtonError(KeyError):
    """Raised when a press is requested for a button the panel does not have."""


class Oven:
    """One complete oven: inputs, outputs, cooking engine and panel controller."""

    def __init__(self, *, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()

        self.output = Output(queue_size=self.settings.ui_event_queue_size)
        self.light = Light(self.output)
        self.display = Display(self.output)
        self.power_tube = PowerTube(self.output, max_watts=self.settings.cook.tube_max_watts)
        self.timer = Timer(tick_seconds=self.settings.cook.tick_seconds)
        self.cook_controller = CookController(
            timer=self.timer,
            display=self.display,
            power_tube=self.power_tube,
        )

        self.door = Door()
        self.buttons: Dict[str, Button] = {
            name: Button(name) for name in (POWER_BUTTON, TIME_BUTTON, START_CANCEL_BUTTON)
        }
        self.ui = UserInterfaceController(
            power_button=self.buttons[POWER_BUTTON],
            time_button=self.buttons[TIME_BUTTON],
            start_cancel_button=self.buttons[START_CANCEL_BUTTON],
            door=self.door,
            display=self.display,
            light=self.light,
            cook_controller=self.cook_controller,
            power_step=self.settings.power.step_watts,
            max_power=self.settings.power.max_watts,
        )
        self.cook_controller.user_interface = self.ui
        logger.info(
            "Oven assembled (power %d..%d W, tick %.3fs)",
            self.settings.power.step_watts,
            self.settings.power.max_watts,
            self.settings.cook.tick_seconds,
        )

    @property
    def mode(self) -> OperatingMode:
        return self.ui.mode

    def press(self, button_name: str) -> None:
        button = self.buttons.get(button_name)
        if button is None:
            raise UnknownButtonError(button_name)
        button.press()

    def open_door(self) -> None:
        self.door.open()

    def close_door(self) -> None:
        self.door.close()

    def status(self) -> Dict[str, Any]:
        cook_time = self.ui.cook_time
        return {
            "mode": self.ui.mode.value,
            "power": self.ui.power,
            "time": None if cook_time is None else {"minutes": cook_time.minutes, "seconds": cook_time.seconds},
            "light_on": self.light.is_on,
            "display": self.display.text,
            "door_open": self.door.is_open,
            "cooking": self.cook_controller.is_cooking,
            "seconds_remaining": self.cook_controller.time_remaining,
        }

    def shutdown(self) -> None:
        self.cook_controller.stop()
        logger.info("Oven shut down")
