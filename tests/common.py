"""Test helpers for Idle Light Colors."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pytest_homeassistant_custom_component.common import MockConfigEntry

from homeassistant.core import HomeAssistant
from homeassistant.helpers import device_registry as dr, entity_registry as er

from .const import ZWAVE_DOMAIN


class FakeZWaveClient:
    """Stand-in for the Z-Wave configuration client.

    Results are consumed per operation in order; the last one repeats.
    """

    def __init__(
        self, version: str | Exception, results: dict[str, list[Any]] | None = None
    ) -> None:
        self.version = version
        self.results = results or {}
        self.version_queries = 0
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    async def async_get_version(self) -> str:
        self.version_queries += 1
        if isinstance(self.version, Exception):
            raise self.version
        return self.version

    async def async_call(self, operation: str, args: Sequence[Any]) -> Any | None:
        self.calls.append((operation, tuple(args)))
        queued = self.results.get(operation, ["Success"])
        result = queued[0]
        if len(queued) > 1:
            queued.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    @property
    def operations(self) -> list[str]:
        return [operation for operation, _ in self.calls]


def add_zwave_node(
    hass: HomeAssistant,
    entry: MockConfigEntry,
    address: str,
    product: str,
    entities: dict[str, str],
) -> None:
    """Register a Z-Wave node and its entities (entity_id -> unique_id)."""
    device = dr.async_get(hass).async_get_or_create(
        config_entry_id=entry.entry_id,
        identifiers={
            (ZWAVE_DOMAIN, address),
            (ZWAVE_DOMAIN, f"{address}-{product}"),
        },
    )
    ent_reg = er.async_get(hass)
    for entity_id, unique_id in entities.items():
        domain, object_id = entity_id.split(".")
        ent_reg.async_get_or_create(
            domain,
            ZWAVE_DOMAIN,
            unique_id,
            suggested_object_id=object_id,
            config_entry=entry,
            device_id=device.id,
        )
