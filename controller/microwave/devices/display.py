"""Front panel display."""
from __future__ import annotations

from typing import Optional

from .output import Output


class Display:
    """Renders power, time and clear commands as text lines."""

    def __init__(self, output: Output) -> None:
        self._output = output
        self._text: Optional[str] = None

    @property
    def text(self) -> Optional[str]:
        """Text currently shown, None when cleared."""
        return self._text

    def show_power(self, power: int) -> None:
        self._show(f"{power} W", power=power)

    def show_time(self, minutes: int, seconds: int) -> None:
        self._show(f"{minutes:02d}:{seconds:02d}", minutes=minutes, seconds=seconds)

    def clear(self) -> None:
        self._text = None
        self._output.output_line("display", "Display cleared", text=None)

    def _show(self, text: str, **data: object) -> None:
        self._text = text
        self._output.output_line("display", f"Display shows: {text}", text=text, **data)
