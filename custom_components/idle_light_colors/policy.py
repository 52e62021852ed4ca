"""Color policy for Idle Light Colors."""

from __future__ import annotations

from .const import POWER_LEVEL_TOLERANCE
from .models import LedColor


def color_for(power_level: float, idle_color: LedColor, active_color: LedColor) -> LedColor:
    """Return the LED color for a dimmer at the given power level."""
    if abs(power_level) < POWER_LEVEL_TOLERANCE:
        return idle_color
    return active_color
