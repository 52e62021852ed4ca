"""Handler registry for configuration call handlers."""

from __future__ import annotations

from ..api import UnsupportedZWaveVersion
from ..const import ZWAVE_VERSION_HS4, ZWAVE_VERSION_LEGACY
from ..models import AdapterMode
from .base import ParameterSetHandler
from .legacy import LegacyHandler, LegacyPreParamHandler
from .native import HS4NativeHandler


class HandlerRegistry:
    """Registry of calling convention handlers.

    Maps the Z-Wave integration version to an adapter mode and each mode to
    its handler, decoupling the adapter from the concrete conventions.
    """

    def __init__(self) -> None:
        """Initialize the registry."""
        self._handlers: dict[AdapterMode, ParameterSetHandler] = {
            handler.mode: handler
            for handler in (
                HS4NativeHandler(),
                LegacyHandler(),
                LegacyPreParamHandler(),
            )
        }

    @staticmethod
    def mode_for_version(version: str) -> AdapterMode:
        """Classify a "major.minor.patch" version string.

        Raises UnsupportedZWaveVersion for anything but major 3 or 4.
        """
        major_part = version.strip().split(".")[0]
        try:
            major = int(major_part)
        except ValueError as err:
            raise UnsupportedZWaveVersion(
                f"Unable to parse Z-Wave integration version {version!r}"
            ) from err

        if major == ZWAVE_VERSION_LEGACY:
            return AdapterMode.LEGACY
        if major == ZWAVE_VERSION_HS4:
            return AdapterMode.HS4_NATIVE

        raise UnsupportedZWaveVersion(
            f"Unsupported Z-Wave integration version {version!r}"
        )

    def get_handler(self, mode: AdapterMode) -> ParameterSetHandler:
        """Get the handler for an adapter mode."""
        try:
            return self._handlers[mode]
        except KeyError as err:
            raise UnsupportedZWaveVersion(f"No handler for mode {mode.value}") from err
