"""Microwave oven front panel controller."""
from .state import CookTime, OperatingMode
from .user_interface import UserInterfaceController

__all__ = ["CookTime", "OperatingMode", "UserInterfaceController"]
