"""Idle Light Colors for Home Assistant.

Keeps the normal mode LED of HomeSeer WD200 family Z-Wave dimmers showing
one color while the load is off and another while it is on.
"""

from __future__ import annotations

from functools import partial
import logging
from typing import Final

import voluptuous as vol

from homeassistant.config_entries import ConfigEntry, ConfigEntryState
from homeassistant.core import HomeAssistant, ServiceCall
from homeassistant.exceptions import (
    ConfigEntryError,
    ConfigEntryNotReady,
    ServiceValidationError,
)
from homeassistant.helpers import config_validation as cv
from homeassistant.helpers.typing import ConfigType

from .api import InvalidDeviceAddress, ZWaveConfigClient
from .catalog import build_catalog
from .const import (
    CONF_ACTIVE_COLOR,
    CONF_IDLE_COLOR,
    CONF_ZWAVE_DOMAIN,
    DEFAULT_ZWAVE_DOMAIN,
    DOMAIN,
)
from .host import async_get_raw_devices, current_power_level
from .models import DEFAULT_ACTIVE_COLOR, DEFAULT_IDLE_COLOR, LedColor, parse_color
from .orchestrator import IdleColorOrchestrator
from .protocol import ProtocolAdapter

_LOGGER = logging.getLogger(__name__)

SERVICE_RECONCILE_ALL: Final = "reconcile_all"

CONFIG_SCHEMA = cv.empty_config_schema(DOMAIN)

type IdleLightColorsConfigEntry = ConfigEntry[IdleColorOrchestrator]


def _configured_colors(entry: ConfigEntry) -> tuple[LedColor, LedColor]:
    """Return the idle and active colors stored in the entry options."""
    return (
        parse_color(entry.options.get(CONF_IDLE_COLOR), DEFAULT_IDLE_COLOR),
        parse_color(entry.options.get(CONF_ACTIVE_COLOR), DEFAULT_ACTIVE_COLOR),
    )


async def async_setup(hass: HomeAssistant, config: ConfigType) -> bool:
    """Set up Idle Light Colors."""
    _async_setup_services(hass)
    return True


async def async_setup_entry(
    hass: HomeAssistant, entry: IdleLightColorsConfigEntry
) -> bool:
    """Set up Idle Light Colors from a config entry."""
    zwave_domain = entry.data.get(CONF_ZWAVE_DOMAIN, DEFAULT_ZWAVE_DOMAIN)

    if zwave_domain not in hass.config.components:
        raise ConfigEntryNotReady(f"Z-Wave integration {zwave_domain} is not loaded")

    try:
        catalog = build_catalog(async_get_raw_devices(hass, zwave_domain), zwave_domain)
    except InvalidDeviceAddress as err:
        raise ConfigEntryError(f"Z-Wave device inventory is broken: {err}") from err

    _LOGGER.debug("Found %d dimmers on %s", len(catalog), zwave_domain)

    idle_color, active_color = _configured_colors(entry)
    orchestrator = IdleColorOrchestrator(
        hass,
        catalog,
        ProtocolAdapter(ZWaveConfigClient(hass, zwave_domain)),
        partial(current_power_level, hass),
        idle_color,
        active_color,
    )

    entry.runtime_data = orchestrator
    await orchestrator.async_start()

    entry.async_on_unload(entry.add_update_listener(_async_options_updated))

    return True


async def async_unload_entry(
    hass: HomeAssistant, entry: IdleLightColorsConfigEntry
) -> bool:
    """Unload a config entry."""
    await entry.runtime_data.async_stop()
    return True


async def _async_options_updated(
    hass: HomeAssistant, entry: IdleLightColorsConfigEntry
) -> None:
    """Forward new colors to the orchestrator without a reload."""
    idle_color, active_color = _configured_colors(entry)
    await entry.runtime_data.async_on_color_configuration_changed(
        idle_color, active_color
    )


def _async_setup_services(hass: HomeAssistant) -> None:
    """Register idle_light_colors services."""

    async def handle_reconcile_all(call: ServiceCall) -> None:
        """Push colors to every managed dimmer now."""
        entries: list[IdleLightColorsConfigEntry] = [
            entry
            for entry in hass.config_entries.async_entries(DOMAIN)
            if entry.state is ConfigEntryState.LOADED
        ]
        if not entries:
            raise ServiceValidationError(
                translation_domain=DOMAIN,
                translation_key="not_loaded",
            )
        for entry in entries:
            await entry.runtime_data.async_reconcile_all()

    hass.services.async_register(
        DOMAIN,
        SERVICE_RECONCILE_ALL,
        handle_reconcile_all,
        schema=vol.Schema({}),
    )
