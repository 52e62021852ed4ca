"""Test the idle/active color policy."""

import pytest

from custom_components.idle_light_colors.models import LedColor, parse_color
from custom_components.idle_light_colors.policy import color_for


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (0.0, LedColor.BLUE),
        (0.05, LedColor.BLUE),
        (-0.05, LedColor.BLUE),
        (0.11, LedColor.WHITE),
        (99.0, LedColor.WHITE),
        (-50.0, LedColor.WHITE),
    ],
)
def test_color_for(level: float, expected: LedColor) -> None:
    """Test levels near zero pick the idle color."""
    assert color_for(level, LedColor.BLUE, LedColor.WHITE) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("red", LedColor.RED),
        ("MAGENTA", LedColor.MAGENTA),
        (" cyan ", LedColor.CYAN),
        (LedColor.GREEN, LedColor.GREEN),
        ("purple", LedColor.BLUE),
        (None, LedColor.BLUE),
        (3, LedColor.BLUE),
    ],
)
def test_parse_color(value: object, expected: LedColor) -> None:
    """Test persisted color names fall back to the default."""
    assert parse_color(value, LedColor.BLUE) is expected
