"""Diagnostics support for Idle Light Colors."""

from __future__ import annotations

from typing import Any

from homeassistant.core import HomeAssistant

from . import IdleLightColorsConfigEntry


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant,
    entry: IdleLightColorsConfigEntry,
) -> dict[str, Any]:
    """Return diagnostics for a config entry."""
    orchestrator = entry.runtime_data
    adapter = orchestrator.adapter

    return {
        "config_entry": {
            "entry_id": entry.entry_id,
            "data": dict(entry.data),
            "options": dict(entry.options),
        },
        "orchestrator": {
            "started": orchestrator.is_started,
            "initial_sync_done": orchestrator.initial_sync_done,
            "reconcile_pending": orchestrator.reconcile_pending,
            "fatal_error": orchestrator.fatal_error,
            "idle_color": orchestrator.idle_color.label,
            "active_color": orchestrator.active_color.label,
            "pending_tasks": orchestrator.pending_task_count,
        },
        "adapter": {
            "mode": adapter.mode.value,
            "zwave_version": adapter.version,
            "fatal_reason": adapter.fatal_reason,
        },
        "dimmers": {
            device_ref: {
                "home_id": device.home_id,
                "node_id": device.node_id,
            }
            for device_ref, device in orchestrator.dimmers.items()
        },
    }
