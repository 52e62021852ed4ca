"""Home Assistant registry and state access for Idle Light Colors."""

from __future__ import annotations

import logging
from typing import Any

from homeassistant.components.light import ATTR_BRIGHTNESS
from homeassistant.const import STATE_ON
from homeassistant.core import HomeAssistant, State, callback
from homeassistant.helpers import device_registry as dr, entity_registry as er

from .const import (
    META_COMMAND_CLASS,
    META_MANUFACTURER_ID,
    META_PROD_ID,
    META_PROD_TYPE,
    META_RELATIONSHIP,
    RELATIONSHIP_CHILD,
    ZWAVE_LEVEL_MAX,
)
from .models import RawDevice

_LOGGER = logging.getLogger(__name__)


@callback
def async_get_raw_devices(hass: HomeAssistant, domain: str) -> list[RawDevice]:
    """Enumerate entities of the Z-Wave integration with their device data."""
    ent_reg = er.async_get(hass)
    dev_reg = dr.async_get(hass)

    raw_devices: list[RawDevice] = []
    for entry in ent_reg.entities.values():
        if entry.platform != domain or not entry.device_id:
            continue

        device = dev_reg.async_get(entry.device_id)
        if device is None:
            continue

        raw_devices.append(
            RawDevice(
                interface=entry.platform,
                address=_node_address(device, domain),
                device_ref=entry.entity_id,
                metadata=_node_metadata(device, entry, domain),
            )
        )

    return raw_devices


def _node_address(device: dr.DeviceEntry, domain: str) -> str:
    """Return the "home_id-node_id" identifier of a device.

    Z-Wave device identifiers: (domain, "home_id-node_id") and
    (domain, "home_id-node_id-manufacturer:type:product").
    """
    for identifier_domain, identifier in device.identifiers:
        if identifier_domain == domain and ":" not in identifier:
            return identifier
    return ""


def _node_metadata(
    device: dr.DeviceEntry, entry: er.RegistryEntry, domain: str
) -> dict[str, Any]:
    """Collect the classification fields of a Z-Wave entity."""
    # Registry entities carry no relationship code; all count as children, so
    # eligibility is decided by the command class below
    metadata: dict[str, Any] = {META_RELATIONSHIP: RELATIONSHIP_CHILD}

    for identifier_domain, identifier in device.identifiers:
        if identifier_domain != domain or ":" not in identifier:
            continue
        product = identifier.rsplit("-", 1)[-1].split(":")
        if len(product) == 3:
            metadata[META_MANUFACTURER_ID] = product[0]
            metadata[META_PROD_TYPE] = product[1]
            metadata[META_PROD_ID] = product[2]
        break

    # unique_id format: "home_id.node_id-command_class-endpoint-property..."
    if entry.unique_id and "." in entry.unique_id:
        value_id = entry.unique_id.split(".", 1)[1].split("-")
        if len(value_id) >= 2:
            metadata[META_COMMAND_CLASS] = value_id[1]

    return metadata


def power_level_from_state(state: State | None) -> float:
    """Convert an entity state to a Z-Wave level (0-99)."""
    if state is None or state.state != STATE_ON:
        return 0.0

    brightness = state.attributes.get(ATTR_BRIGHTNESS)
    if brightness is None:
        return float(ZWAVE_LEVEL_MAX)

    try:
        return float(brightness) * ZWAVE_LEVEL_MAX / 255
    except (TypeError, ValueError):
        _LOGGER.debug("Ignoring invalid brightness %s of %s", brightness, state.entity_id)
        return float(ZWAVE_LEVEL_MAX)


@callback
def current_power_level(hass: HomeAssistant, entity_id: str) -> float:
    """Return the current level of an entity."""
    return power_level_from_state(hass.states.get(entity_id))
