"""Version-adaptive access to the Z-Wave configuration API."""

from __future__ import annotations

import asyncio
import logging

from .api import UnsupportedZWaveVersion, ZWaveConfigClient
from .const import DEFAULT_CALL_TIMEOUT, LED_COLOR_PARAM_SIZE
from .handlers.registry import HandlerRegistry
from .models import AdapterMode, DimmerConfigParam, LedColor

_LOGGER = logging.getLogger(__name__)


class ProtocolAdapter:
    """Sets the normal mode LED color through whichever convention works.

    The mode is detected from the integration version on first use:
    3.x starts as LEGACY, 4.x is HS4_NATIVE, anything else is FATAL. A LEGACY
    call answered with no result downgrades to LEGACY_PRE_PARAM for the rest
    of the process and is retried once under the new mode.
    """

    def __init__(
        self, client: ZWaveConfigClient, timeout: float = DEFAULT_CALL_TIMEOUT
    ) -> None:
        """Initialize the adapter."""
        self._client = client
        self._timeout = timeout
        self._registry = HandlerRegistry()
        self._mode = AdapterMode.UNKNOWN
        self._fatal_reason: str | None = None
        self._version: str | None = None
        self._lock = asyncio.Lock()

    @property
    def mode(self) -> AdapterMode:
        """Return the current adapter mode."""
        return self._mode

    @property
    def version(self) -> str | None:
        """Return the detected integration version."""
        return self._version

    @property
    def fatal_reason(self) -> str | None:
        """Return why the adapter became unusable."""
        return self._fatal_reason

    async def async_set_color(self, home_id: str, node_id: int, color: LedColor) -> str:
        """Set the normal mode LED color of a node.

        Returns a description of the outcome. Raises UnsupportedZWaveVersion
        when the integration version is not supported; other failures are
        reported in the description.
        """
        mode = await self._async_ensure_mode()

        try:
            result = await self._async_set_parameter(mode, home_id, node_id, color)
            if result is None and mode is AdapterMode.LEGACY:
                mode = await self._async_downgrade()
                result = await self._async_set_parameter(mode, home_id, node_id, color)
        except TimeoutError:
            _LOGGER.warning(
                "Z-Wave configuration call for node %d timed out after %s seconds",
                node_id,
                self._timeout,
            )
            return f"Timed out after {self._timeout} seconds"
        except Exception as err:
            _LOGGER.debug("Z-Wave configuration call for node %d failed: %s", node_id, err)
            return f"Error: {err}"

        if result is None:
            return "No result"
        return result

    async def _async_set_parameter(
        self, mode: AdapterMode, home_id: str, node_id: int, color: LedColor
    ) -> str | None:
        """Issue one configuration call under the given mode."""
        handler = self._registry.get_handler(mode)
        async with asyncio.timeout(self._timeout):
            return await handler.async_set_parameter(
                self._client,
                home_id,
                node_id,
                DimmerConfigParam.NORMAL_MODE_LED_COLOR,
                LED_COLOR_PARAM_SIZE,
                int(color),
            )

    async def _async_ensure_mode(self) -> AdapterMode:
        """Detect the mode on first use."""
        async with self._lock:
            if self._mode is AdapterMode.FATAL:
                raise UnsupportedZWaveVersion(self._fatal_reason)
            if self._mode is not AdapterMode.UNKNOWN:
                return self._mode

            try:
                async with asyncio.timeout(self._timeout):
                    version = await self._client.async_get_version()
                mode = self._registry.mode_for_version(version)
            except UnsupportedZWaveVersion as err:
                self._enter_fatal(str(err))
                raise
            except Exception as err:
                reason = f"Unable to determine Z-Wave integration version: {err}"
                self._enter_fatal(reason)
                raise UnsupportedZWaveVersion(reason) from err

            self._version = version
            self._mode = mode
            _LOGGER.info(
                "Z-Wave integration version %s detected, using %s calls",
                version,
                mode.value,
            )
            return mode

    async def _async_downgrade(self) -> AdapterMode:
        """Switch from LEGACY to LEGACY_PRE_PARAM."""
        async with self._lock:
            if self._mode is AdapterMode.LEGACY:
                _LOGGER.warning(
                    "Z-Wave integration %s does not support parameter values, "
                    "falling back to configuration_set",
                    self._version,
                )
                self._mode = AdapterMode.LEGACY_PRE_PARAM
            return self._mode

    def _enter_fatal(self, reason: str) -> None:
        """Mark the adapter unusable until restart."""
        self._mode = AdapterMode.FATAL
        self._fatal_reason = reason
        _LOGGER.error("Z-Wave configuration calls disabled: %s", reason)
