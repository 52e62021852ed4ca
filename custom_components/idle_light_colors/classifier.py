"""Dimmer eligibility classification for Idle Light Colors."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .const import (
    MANUFACTURER_HOMESEER,
    META_COMMAND_CLASS,
    META_MANUFACTURER_ID,
    META_PROD_ID,
    META_PROD_TYPE,
    META_RELATIONSHIP,
    PROD_TYPE_HOMESEER_SWITCH,
    RELATIONSHIP_CHILD,
    SUPPORTED_COMMAND_CLASSES,
    SUPPORTED_PROD_IDS,
)


def _read_int(metadata: Mapping[str, Any], key: str) -> int:
    """Read an integer metadata field.

    Accepts ints and numeric strings ("12", "0x0c"). Anything missing or
    unparseable reads as 0.
    """
    try:
        value = metadata.get(key)
    except Exception:  # noqa: BLE001
        return 0

    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value

    try:
        return int(str(value).strip(), 0)
    except ValueError:
        return 0


def is_dimmer(metadata: Mapping[str, Any]) -> bool:
    """Return whether a device is a supported dimmer."""
    manufacturer_id = _read_int(metadata, META_MANUFACTURER_ID)
    prod_id = _read_int(metadata, META_PROD_ID)
    prod_type = _read_int(metadata, META_PROD_TYPE)
    relationship = _read_int(metadata, META_RELATIONSHIP)
    command_class = _read_int(metadata, META_COMMAND_CLASS)

    return (
        manufacturer_id == MANUFACTURER_HOMESEER
        and prod_type == PROD_TYPE_HOMESEER_SWITCH
        and prod_id in SUPPORTED_PROD_IDS
        and relationship == RELATIONSHIP_CHILD
        and command_class in SUPPORTED_COMMAND_CLASSES
    )
