"""Client for the Z-Wave integration's configuration services."""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.loader import async_get_integration

from .const import ATTR_ARGS, ATTR_RESULT

_LOGGER = logging.getLogger(__name__)


class IdleLightColorsError(HomeAssistantError):
    """Base exception for Idle Light Colors."""


class UnsupportedZWaveVersion(IdleLightColorsError):
    """Exception to indicate the Z-Wave integration version is not supported."""


class InvalidDeviceAddress(IdleLightColorsError):
    """Exception to indicate a Z-Wave device address could not be parsed."""


class ZWaveConfigClient:
    """Calls configuration operations exposed by the Z-Wave integration."""

    def __init__(self, hass: HomeAssistant, domain: str) -> None:
        """Initialize the client.

        Args:
            hass: Home Assistant instance
            domain: Domain of the Z-Wave integration

        """
        self.hass = hass
        self.domain = domain

    async def async_get_version(self) -> str:
        """Return the version reported by the Z-Wave integration."""
        integration = await async_get_integration(self.hass, self.domain)
        if integration.version is None:
            return ""
        return str(integration.version)

    async def async_call(self, operation: str, args: Sequence[Any]) -> Any | None:
        """Invoke a configuration operation and return its result.

        Returns None when the integration answers without a result.
        """
        _LOGGER.debug("Calling %s.%s with %s", self.domain, operation, args)
        response = await self.hass.services.async_call(
            self.domain,
            operation,
            {ATTR_ARGS: list(args)},
            blocking=True,
            return_response=True,
        )
        if not response:
            return None
        return response.get(ATTR_RESULT)
