"""Magnetron power tube."""
from __future__ import annotations

import logging

from ..devices.output import Output

logger = logging.getLogger(__name__)


class PowerTube:
    def __init__(self, output: Output, *, max_watts: int = 700) -> None:
        self._output = output
        self.max_watts = max_watts
        self._power = 0

    @property
    def is_on(self) -> bool:
        return self._power > 0

    @property
    def power(self) -> int:
        return self._power

    def turn_on(self, power: int) -> None:
        if not 1 <= power <= self.max_watts:
            raise ValueError(f"Power must be between 1 and {self.max_watts} W, got {power}")
        if self.is_on:
            raise RuntimeError("Power tube is already on")
        self._power = power
        self._output.output_line("power_tube", f"PowerTube works with {power} W", power=power)

    def turn_off(self) -> None:
        if not self.is_on:
            return
        self._power = 0
        self._output.output_line("power_tube", "PowerTube turned off", power=0)
