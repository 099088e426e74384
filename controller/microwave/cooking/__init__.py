"""Cooking engine: power tube, countdown timer and cook cycle sequencing."""
from .cook_controller import CookController
from .power_tube import PowerTube
from .timer import Timer

__all__ = ["CookController", "PowerTube", "Timer"]
