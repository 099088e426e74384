"""Oven cavity light."""
from __future__ import annotations

from .output import Output


class Light:
    def __init__(self, output: Output) -> None:
        self._output = output
        self._is_on = False

    @property
    def is_on(self) -> bool:
        return self._is_on

    def turn_on(self) -> None:
        if self._is_on:
            return
        self._is_on = True
        self._output.output_line("light", "Light is turned on", on=True)

    def turn_off(self) -> None:
        if not self._is_on:
            return
        self._is_on = False
        self._output.output_line("light", "Light is turned off", on=False)
