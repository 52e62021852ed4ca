"""Idle Light Colors orchestrator - keeps dimmer LEDs in sync with power state."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from datetime import datetime
import logging
from typing import Any

from homeassistant.const import EVENT_STATE_CHANGED, STATE_UNAVAILABLE, STATE_UNKNOWN
from homeassistant.core import CALLBACK_TYPE, Event, HassJob, HomeAssistant, callback
from homeassistant.helpers.event import async_call_later

from .api import UnsupportedZWaveVersion
from .const import DEFAULT_RECONCILE_DEBOUNCE, EVENT_FATAL
from .host import power_level_from_state
from .models import DimmerDevice, LedColor
from .policy import color_for
from .protocol import ProtocolAdapter

_LOGGER = logging.getLogger(__name__)

_NO_VALUE_STATES = frozenset({STATE_UNAVAILABLE, STATE_UNKNOWN})


class IdleColorOrchestrator:
    """Decides when and for which dimmers LED colors are pushed.

    The first value change after startup is taken as the signal that the
    Z-Wave integration is ready and triggers a full reconciliation. Later
    changes only update the dimmer that changed. Color edits are debounced
    into a single full reconciliation.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        catalog: Mapping[str, DimmerDevice],
        adapter: ProtocolAdapter,
        power_level: Callable[[str], float],
        idle_color: LedColor,
        active_color: LedColor,
        debounce: float = DEFAULT_RECONCILE_DEBOUNCE,
    ) -> None:
        """Initialize orchestrator."""
        self.hass = hass
        self._catalog = dict(catalog)
        self._adapter = adapter
        self._power_level = power_level
        self._idle_color = idle_color
        self._active_color = active_color
        self._debounce = debounce
        self._lock = asyncio.Lock()
        self._initial_sync_done = False
        self._cancel_pending: CALLBACK_TYPE | None = None
        self._fatal_error: str | None = None
        self._started = False
        self._unsub_listeners: list[CALLBACK_TYPE] = []
        self._pending_tasks: set[asyncio.Task[Any]] = set()

    # ─────────────────────────────────────────────────────────────
    # LIFECYCLE
    # ─────────────────────────────────────────────────────────────

    async def async_start(self) -> None:
        """Start listening for value changes."""
        if self._started:
            return

        _LOGGER.info("Starting Idle Light Colors with %d dimmers", len(self._catalog))
        self._unsub_listeners.append(
            self.hass.bus.async_listen(EVENT_STATE_CHANGED, self._on_state_changed)
        )
        self._started = True

    async def async_stop(self) -> None:
        """Stop the orchestrator."""
        _LOGGER.info("Stopping Idle Light Colors")

        for unsub in self._unsub_listeners:
            unsub()
        self._unsub_listeners.clear()

        async with self._lock:
            self._cancel_pending_reconcile()

        for task in self._pending_tasks:
            task.cancel()
        if self._pending_tasks:
            await asyncio.gather(*self._pending_tasks, return_exceptions=True)
        self._pending_tasks.clear()

        self._started = False

    def _create_background_task(self, coro: Any, name: str) -> None:
        """Create a tracked background task."""
        task = self.hass.async_create_background_task(coro, name)
        self._pending_tasks.add(task)
        task.add_done_callback(self._pending_tasks.discard)

    # ─────────────────────────────────────────────────────────────
    # EVENT HANDLERS
    # ─────────────────────────────────────────────────────────────

    @callback
    def _on_state_changed(self, event: Event) -> None:
        """Handle state_changed events of managed dimmers."""
        entity_id = event.data.get("entity_id", "")
        if entity_id not in self._catalog:
            return

        new_state = event.data.get("new_state")
        if new_state is None or new_state.state in _NO_VALUE_STATES:
            return

        # Attribute-only changes that leave the level alone are not value reports
        level = power_level_from_state(new_state)
        old_state = event.data.get("old_state")
        if (
            old_state is not None
            and old_state.state not in _NO_VALUE_STATES
            and power_level_from_state(old_state) == level
        ):
            return

        self._create_background_task(
            self.async_on_device_value_changed(entity_id, level),
            f"idle_light_colors_value_changed_{entity_id}",
        )

    async def async_on_device_value_changed(
        self, device_ref: str, new_value: float | None
    ) -> None:
        """Handle a dimmer reporting a new value."""
        device = self._catalog.get(device_ref)
        if device is None:
            return

        try:
            async with self._lock:
                if self._fatal_error:
                    return
                first_event = not self._initial_sync_done
                self._initial_sync_done = True

            _LOGGER.debug("Dimmer %s was set to %s", device_ref, new_value)

            if first_event:
                _LOGGER.info(
                    "First value change received, Z-Wave is ready; updating all dimmers"
                )
                await self.async_reconcile_all()
            else:
                await self.async_reconcile_one(device, new_value)
        except Exception:
            _LOGGER.exception("Error handling value change of %s", device_ref)

    async def async_on_color_configuration_changed(
        self, idle_color: LedColor, active_color: LedColor
    ) -> None:
        """Apply new idle/active colors."""
        async with self._lock:
            self._idle_color = idle_color
            self._active_color = active_color
            _LOGGER.info(
                "LED colors changed to idle %s, active %s",
                idle_color.label,
                active_color.label,
            )

            if not self._initial_sync_done or self._fatal_error:
                return

            self._schedule_reconcile_all()

    # ─────────────────────────────────────────────────────────────
    # RECONCILIATION
    # ─────────────────────────────────────────────────────────────

    async def async_reconcile_one(
        self, device: DimmerDevice, value: float | None = None
    ) -> None:
        """Push the color matching a dimmer's level."""
        async with self._lock:
            if self._fatal_error:
                return
            idle_color = self._idle_color
            active_color = self._active_color

        try:
            level = value if value is not None else self._power_level(device.device_ref)
            color = color_for(level, idle_color, active_color)
            result = await self._adapter.async_set_color(
                device.home_id, device.node_id, color
            )
        except UnsupportedZWaveVersion as err:
            await self._async_enter_fatal(str(err))
            return
        except Exception:
            _LOGGER.exception("Failed to update LED color of %s", device.device_ref)
            return

        _LOGGER.info(
            "Setting normal mode color for device %s (node ID %d) to %s; result: %s",
            device.device_ref,
            device.node_id,
            color.label,
            result,
        )

    async def async_reconcile_all(self) -> None:
        """Push colors to every managed dimmer."""
        _LOGGER.debug("Updating LED colors of %d dimmers", len(self._catalog))
        for device in self._catalog.values():
            if self._fatal_error:
                return
            await self.async_reconcile_one(device)

    @callback
    def _schedule_reconcile_all(self) -> None:
        """Schedule a full reconciliation, replacing any pending one."""
        self._cancel_pending_reconcile()
        self._cancel_pending = async_call_later(
            self.hass,
            self._debounce,
            HassJob(
                self._async_run_scheduled_reconcile,
                "idle_light_colors_reconcile",
                cancel_on_shutdown=True,
            ),
        )

    @callback
    def _cancel_pending_reconcile(self) -> None:
        """Cancel the pending full reconciliation if it has not fired."""
        if self._cancel_pending is not None:
            self._cancel_pending()
            self._cancel_pending = None

    async def _async_run_scheduled_reconcile(self, _now: datetime) -> None:
        """Run the debounced full reconciliation."""
        # Cleared before the first await so a newer schedule is never lost
        self._cancel_pending = None
        await self.async_reconcile_all()

    async def _async_enter_fatal(self, reason: str) -> None:
        """Stop all updates until restart."""
        async with self._lock:
            if self._fatal_error:
                return
            self._fatal_error = reason
            self._cancel_pending_reconcile()

        _LOGGER.error("Idle Light Colors halted: %s", reason)
        self.hass.bus.async_fire(EVENT_FATAL, {"reason": reason})

    # ─────────────────────────────────────────────────────────────
    # STATUS
    # ─────────────────────────────────────────────────────────────

    @property
    def is_started(self) -> bool:
        """Return whether the orchestrator is started."""
        return self._started

    @property
    def initial_sync_done(self) -> bool:
        """Return whether the first value change has been seen."""
        return self._initial_sync_done

    @property
    def reconcile_pending(self) -> bool:
        """Return whether a debounced reconciliation is scheduled."""
        return self._cancel_pending is not None

    @property
    def fatal_error(self) -> str | None:
        """Return the reason updates were halted, if they were."""
        return self._fatal_error

    @property
    def idle_color(self) -> LedColor:
        """Return the configured idle color."""
        return self._idle_color

    @property
    def active_color(self) -> LedColor:
        """Return the configured active color."""
        return self._active_color

    @property
    def adapter(self) -> ProtocolAdapter:
        """Return the protocol adapter."""
        return self._adapter

    @property
    def dimmers(self) -> dict[str, DimmerDevice]:
        """Return managed dimmers."""
        return dict(self._catalog)

    @property
    def pending_task_count(self) -> int:
        """Return number of pending tasks."""
        return len(self._pending_tasks)
