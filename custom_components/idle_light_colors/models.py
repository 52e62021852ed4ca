"""Data structures for Idle Light Colors."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any


class LedColor(IntEnum):
    """Normal mode LED colors supported by the dimmers."""

    WHITE = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    MAGENTA = 4
    YELLOW = 5
    CYAN = 6

    @property
    def label(self) -> str:
        """Return the human-readable color name."""
        return self.name.title()


DEFAULT_IDLE_COLOR = LedColor.BLUE
DEFAULT_ACTIVE_COLOR = LedColor.WHITE


def parse_color(value: Any, default: LedColor) -> LedColor:
    """Resolve a persisted color name, falling back to the default."""
    if isinstance(value, LedColor):
        return value
    if isinstance(value, str):
        try:
            return LedColor[value.strip().upper()]
        except KeyError:
            pass
    return default


class DimmerConfigParam(IntEnum):
    """Configuration parameters of the WD200 family."""

    STATUS_MODE_LED_MODE = 3
    INVERT_PADDLE = 4
    RAMP_RATE_REMOTE = 11
    RAMP_RATE_LOCAL = 12
    STATUS_MODE_ACTIVE = 13
    NORMAL_MODE_LED_COLOR = 14
    STATUS_MODE_LED1_COLOR = 21
    STATUS_MODE_LED2_COLOR = 22
    STATUS_MODE_LED3_COLOR = 23
    STATUS_MODE_LED4_COLOR = 24
    STATUS_MODE_LED5_COLOR = 25
    STATUS_MODE_LED6_COLOR = 26
    STATUS_MODE_LED7_COLOR = 27
    STATUS_MODE_BLINK_FREQUENCY = 30
    STATUS_MODE_BLINK_BITMASK = 31


class AdapterMode(Enum):
    """Calling convention currently assumed for the Z-Wave integration."""

    UNKNOWN = "unknown"
    LEGACY = "legacy"
    HS4_NATIVE = "hs4_native"
    LEGACY_PRE_PARAM = "legacy_pre_param"
    FATAL = "fatal"


class ConfigResult(IntEnum):
    """Result codes of the legacy configuration_set operation."""

    UNKNOWN = 0
    SUCCESS = 1
    QUEUED = 2
    FAILED = 3


@dataclass(frozen=True)
class DimmerDevice:
    """A dimmer whose LED color is managed."""

    home_id: str
    node_id: int
    device_ref: str  # Entity ID of the switch entity


@dataclass(frozen=True)
class RawDevice:
    """A device as enumerated from the host registries."""

    interface: str  # Integration domain owning the entity
    address: str  # "<home_id>-<node_id>"
    device_ref: str
    metadata: Mapping[str, Any] = field(default_factory=dict)
