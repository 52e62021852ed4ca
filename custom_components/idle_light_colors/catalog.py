"""Dimmer catalog for Idle Light Colors."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
import logging

from .api import InvalidDeviceAddress
from .classifier import is_dimmer
from .models import DimmerDevice, RawDevice

_LOGGER = logging.getLogger(__name__)


def parse_address(address: str) -> tuple[str, int]:
    """Split a Z-Wave device address into home ID and node ID.

    Address format: "home_id-node_id" with optional trailing parts.
    """
    parts = address.split("-")
    if len(parts) < 2 or not parts[0]:
        raise InvalidDeviceAddress(f"Malformed Z-Wave address: {address!r}")

    try:
        node_id = int(parts[1])
    except ValueError as err:
        raise InvalidDeviceAddress(
            f"Malformed node ID in Z-Wave address: {address!r}"
        ) from err

    if node_id < 0:
        raise InvalidDeviceAddress(f"Negative node ID in Z-Wave address: {address!r}")

    return parts[0], node_id


def build_catalog(
    raw_devices: Iterable[RawDevice], interface: str
) -> dict[str, DimmerDevice]:
    """Build the managed dimmers keyed by device reference.

    Only the first dimmer found for a node is kept. Raises
    InvalidDeviceAddress when a device of the interface has a broken address.
    """
    catalog: dict[str, DimmerDevice] = {}
    claimed: dict[str, set[int]] = defaultdict(set)

    for raw in raw_devices:
        if raw.interface != interface:
            continue

        home_id, node_id = parse_address(raw.address)
        if node_id in claimed[home_id]:
            _LOGGER.debug(
                "Skipping %s, node %d on network %s already claimed",
                raw.device_ref,
                node_id,
                home_id,
            )
            continue

        if not is_dimmer(raw.metadata):
            continue

        claimed[home_id].add(node_id)
        catalog[raw.device_ref] = DimmerDevice(
            home_id=home_id,
            node_id=node_id,
            device_ref=raw.device_ref,
        )
        _LOGGER.debug(
            "Found dimmer %s (node %d on network %s)", raw.device_ref, node_id, home_id
        )

    return catalog
