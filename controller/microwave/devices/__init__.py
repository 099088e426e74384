"""Input and output devices wired to the panel controller."""
from .button import Button
from .display import Display
from .door import Door
from .light import Light
from .output import Output

__all__ = ["Button", "Display", "Door", "Light", "Output"]
