"""Test setting up Idle Light Colors."""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import AsyncMock, patch

import pytest
from pytest_homeassistant_custom_component.common import (
    MockConfigEntry,
    async_fire_time_changed,
)

from custom_components.idle_light_colors import SERVICE_RECONCILE_ALL
from custom_components.idle_light_colors.api import ZWaveConfigClient
from custom_components.idle_light_colors.const import (
    CONF_ACTIVE_COLOR,
    CONF_IDLE_COLOR,
    CONF_ZWAVE_DOMAIN,
    DOMAIN,
    OP_SET_PARAMETER_VALUE,
)
from custom_components.idle_light_colors.diagnostics import (
    async_get_config_entry_diagnostics,
)
from custom_components.idle_light_colors.models import LedColor
from homeassistant.config_entries import ConfigEntryState
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ServiceValidationError
from homeassistant.setup import async_setup_component
from homeassistant.util import dt as dt_util

from .common import add_zwave_node
from .const import HOME_ID, ZWAVE_DOMAIN

WD200_PRODUCT = "12:17479:12342"


def _expected_call(node_id: int, color: LedColor) -> tuple:
    return (OP_SET_PARAMETER_VALUE, (HOME_ID, node_id, 14, 1, int(color)))


@pytest.fixture
def zwave_entry(hass: HomeAssistant) -> MockConfigEntry:
    """Loaded Z-Wave integration with one WD200+ dimmer."""
    hass.config.components.add(ZWAVE_DOMAIN)
    entry = MockConfigEntry(domain=ZWAVE_DOMAIN)
    entry.add_to_hass(hass)
    add_zwave_node(
        hass,
        entry,
        f"{HOME_ID}-5",
        WD200_PRODUCT,
        {"light.kitchen": f"{HOME_ID}.5-38-0-currentValue"},
    )
    return entry


@pytest.fixture
def config_entry(hass: HomeAssistant) -> MockConfigEntry:
    """Idle Light Colors config entry."""
    entry = MockConfigEntry(
        domain=DOMAIN,
        data={CONF_ZWAVE_DOMAIN: ZWAVE_DOMAIN},
        options={CONF_IDLE_COLOR: "red", CONF_ACTIVE_COLOR: "green"},
    )
    entry.add_to_hass(hass)
    return entry


@pytest.fixture
def mock_call():
    """Patch the Z-Wave client to a 4.x integration."""
    with (
        patch.object(
            ZWaveConfigClient, "async_get_version", AsyncMock(return_value="4.0.0")
        ),
        patch.object(
            ZWaveConfigClient, "async_call", AsyncMock(return_value="Success")
        ) as call_mock,
    ):
        yield call_mock


async def test_setup_and_unload(
    hass: HomeAssistant,
    zwave_entry: MockConfigEntry,
    config_entry: MockConfigEntry,
    mock_call: AsyncMock,
) -> None:
    """Test the entry loads, reacts to state changes and unloads."""
    assert await hass.config_entries.async_setup(config_entry.entry_id)
    await hass.async_block_till_done()

    assert config_entry.state is ConfigEntryState.LOADED
    orchestrator = config_entry.runtime_data
    assert list(orchestrator.dimmers) == ["light.kitchen"]
    assert orchestrator.idle_color is LedColor.RED
    assert orchestrator.active_color is LedColor.GREEN

    hass.states.async_set("light.kitchen", "off")
    await hass.async_block_till_done(wait_background_tasks=True)
    assert mock_call.await_args_list[-1].args == _expected_call(5, LedColor.RED)

    hass.states.async_set("light.kitchen", "on", {"brightness": 200})
    await hass.async_block_till_done(wait_background_tasks=True)
    assert mock_call.await_args_list[-1].args == _expected_call(5, LedColor.GREEN)
    assert mock_call.await_count == 2

    assert await hass.config_entries.async_unload(config_entry.entry_id)
    await hass.async_block_till_done()
    assert config_entry.state is ConfigEntryState.NOT_LOADED


async def test_options_update_pushes_colors(
    hass: HomeAssistant,
    zwave_entry: MockConfigEntry,
    config_entry: MockConfigEntry,
    mock_call: AsyncMock,
) -> None:
    """Test new colors are applied without reloading."""
    assert await hass.config_entries.async_setup(config_entry.entry_id)
    await hass.async_block_till_done()
    orchestrator = config_entry.runtime_data

    hass.states.async_set("light.kitchen", "off")
    await hass.async_block_till_done(wait_background_tasks=True)
    mock_call.reset_mock()

    hass.config_entries.async_update_entry(
        config_entry, options={CONF_IDLE_COLOR: "magenta", CONF_ACTIVE_COLOR: "white"}
    )
    await hass.async_block_till_done()

    assert config_entry.runtime_data is orchestrator
    assert orchestrator.idle_color is LedColor.MAGENTA
    assert orchestrator.reconcile_pending

    async_fire_time_changed(hass, dt_util.utcnow() + timedelta(seconds=2))
    await hass.async_block_till_done()

    mock_call.assert_awaited_once()
    assert mock_call.await_args.args == _expected_call(5, LedColor.MAGENTA)


async def test_reconcile_all_service(
    hass: HomeAssistant,
    zwave_entry: MockConfigEntry,
    config_entry: MockConfigEntry,
    mock_call: AsyncMock,
) -> None:
    """Test the service pushes colors to every dimmer."""
    hass.states.async_set("light.kitchen", "on", {"brightness": 255})
    assert await hass.config_entries.async_setup(config_entry.entry_id)
    await hass.async_block_till_done()

    await hass.services.async_call(DOMAIN, SERVICE_RECONCILE_ALL, blocking=True)

    mock_call.assert_awaited_once()
    assert mock_call.await_args.args == _expected_call(5, LedColor.GREEN)


async def test_reconcile_all_service_not_loaded(hass: HomeAssistant) -> None:
    """Test the service refuses to run without a loaded entry."""
    assert await async_setup_component(hass, DOMAIN, {})

    with pytest.raises(ServiceValidationError):
        await hass.services.async_call(DOMAIN, SERVICE_RECONCILE_ALL, blocking=True)


async def test_setup_retry_without_zwave(
    hass: HomeAssistant, config_entry: MockConfigEntry
) -> None:
    """Test setup waits for the Z-Wave integration."""
    await hass.config_entries.async_setup(config_entry.entry_id)
    await hass.async_block_till_done()

    assert config_entry.state is ConfigEntryState.SETUP_RETRY


async def test_setup_error_on_malformed_address(
    hass: HomeAssistant,
    zwave_entry: MockConfigEntry,
    config_entry: MockConfigEntry,
) -> None:
    """Test a broken device inventory fails setup."""
    add_zwave_node(
        hass,
        zwave_entry,
        f"{HOME_ID}-x",
        WD200_PRODUCT,
        {"light.broken": f"{HOME_ID}.x-38-0-currentValue"},
    )

    await hass.config_entries.async_setup(config_entry.entry_id)
    await hass.async_block_till_done()

    assert config_entry.state is ConfigEntryState.SETUP_ERROR


async def test_diagnostics(
    hass: HomeAssistant,
    zwave_entry: MockConfigEntry,
    config_entry: MockConfigEntry,
    mock_call: AsyncMock,
) -> None:
    """Test diagnostics report engine and adapter state."""
    assert await hass.config_entries.async_setup(config_entry.entry_id)
    await hass.async_block_till_done()
    hass.states.async_set("light.kitchen", "off")
    await hass.async_block_till_done(wait_background_tasks=True)

    diagnostics = await async_get_config_entry_diagnostics(hass, config_entry)

    assert diagnostics["orchestrator"]["initial_sync_done"] is True
    assert diagnostics["orchestrator"]["fatal_error"] is None
    assert diagnostics["orchestrator"]["idle_color"] == "Red"
    assert diagnostics["adapter"] == {
        "mode": "hs4_native",
        "zwave_version": "4.0.0",
        "fatal_reason": None,
    }
    assert diagnostics["dimmers"] == {"light.kitchen": {"home_id": HOME_ID, "node_id": 5}}
