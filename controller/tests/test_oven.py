"""
End-to-end tests of the assembled oven with the real cooking engine.
"""
import asyncio
from unittest.mock import patch

import pytest

from microwave.config import CookSettings, Settings
from microwave.oven import Oven, UnknownButtonError
from microwave.state import OperatingMode

TICK = 0.01


def make_oven():
    return Oven(settings=Settings(_env_file=None, cook=CookSettings(tick_seconds=TICK)))


class TestOven:

    def setup_method(self):
        self.oven = make_oven()

    def test_initial_status(self):
        assert self.oven.status() == {
            "mode": "ready",
            "power": None,
            "time": None,
            "light_on": False,
            "display": None,
            "door_open": False,
            "cooking": False,
            "seconds_remaining": 0,
        }

    def test_unknown_button(self):
        with pytest.raises(UnknownButtonError):
            self.oven.press("defrost")

    def test_setup_then_door_cycle(self):
        self.oven.press("power")
        self.oven.press("power")
        self.oven.press("time")
        status = self.oven.status()
        assert status["mode"] == "set_time"
        assert status["power"] == 100
        assert status["time"] == {"minutes": 1, "seconds": 0}
        assert status["display"] == "01:00"

        self.oven.open_door()
        status = self.oven.status()
        assert status["mode"] == "door_open"
        assert status["light_on"] is True
        assert status["display"] is None
        assert status["power"] is None

        self.oven.close_door()
        assert self.oven.mode == OperatingMode.READY
        assert self.oven.light.is_on is False

    @pytest.mark.asyncio
    async def test_cook_cycle_runs_to_completion(self):
        oven = Oven(settings=Settings(_env_file=None, cook=CookSettings(tick_seconds=0.001)))
        oven.press("power")
        oven.press("time")
        oven.press("start-cancel")

        assert oven.mode == OperatingMode.COOKING
        assert oven.light.is_on
        assert oven.power_tube.power == 50

        for _ in range(2000):
            if oven.mode == OperatingMode.READY:
                break
            await asyncio.sleep(0.005)

        assert oven.mode == OperatingMode.READY
        assert oven.light.is_on is False
        assert oven.display.text is None
        assert oven.power_tube.is_on is False

    @pytest.mark.asyncio
    async def test_door_open_interrupts_cooking(self):
        oven = make_oven()
        oven.press("power")
        oven.press("time")
        oven.press("start-cancel")
        await asyncio.sleep(TICK * 3)

        oven.open_door()
        await asyncio.sleep(TICK * 3)

        assert oven.mode == OperatingMode.DOOR_OPEN
        assert oven.cook_controller.is_cooking is False
        assert oven.power_tube.is_on is False
        assert oven.light.is_on is True
        assert oven.display.text is None

    def test_start_without_event_loop_leaves_oven_usable(self):
        self.oven.press("power")
        self.oven.press("time")
        # The countdown cannot be scheduled here, so the start is refused
        self.oven.press("start-cancel")

        status = self.oven.status()
        assert status["mode"] == "set_time"
        assert status["light_on"] is False
        assert status["cooking"] is False
        assert self.oven.power_tube.is_on is False

        self.oven.open_door()
        assert self.oven.mode == OperatingMode.DOOR_OPEN

    @pytest.mark.asyncio
    async def test_start_succeeds_after_refused_start(self):
        oven = make_oven()
        oven.press("power")
        oven.press("time")
        with patch.object(oven.timer, "start", side_effect=RuntimeError("no loop")):
            oven.press("start-cancel")
        assert oven.mode == OperatingMode.SET_TIME
        assert oven.light.is_on is False

        oven.press("start-cancel")

        assert oven.mode == OperatingMode.COOKING
        assert oven.light.is_on
        assert oven.power_tube.power == 50
        oven.shutdown()
