"""Shared panel state definitions for the microwave front panel."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict


class OperatingMode(str, enum.Enum):
    """
    Panel modes. Exactly one is active at any instant:

    1. READY      - Idle, nothing accumulated, light off
    2. DOOR_OPEN  - Door is open (entered from any mode), light on
    3. SET_POWER  - Power button pressed, accumulating power level
    4. SET_TIME   - Time button pressed, accumulating cook minutes
    5. COOKING    - Start pressed from SET_TIME, cook controller running
    """
    READY = "ready"
    DOOR_OPEN = "door_open"
    SET_POWER = "set_power"
    SET_TIME = "set_time"
    COOKING = "cooking"


@dataclass(frozen=True)
class CookTime:
    """Accumulated cook time. The panel only ever sets whole minutes."""

    minutes: int
    seconds: int = 0

    @property
    def total_seconds(self) -> int:
        return self.minutes * 60 + self.seconds

    def add_minute(self) -> "CookTime":
        return CookTime(self.minutes + 1, self.seconds)


@dataclass
class PanelEvent:
    """Event payload distributed to UI clients over the local WebSocket."""

    type: str
    data: Dict[str, Any]


__all__ = ["OperatingMode", "CookTime", "PanelEvent"]
