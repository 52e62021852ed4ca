"""Config flow for Idle Light Colors."""

from __future__ import annotations

from typing import Any

import voluptuous as vol

from homeassistant.config_entries import ConfigFlow, ConfigFlowResult, OptionsFlow
from homeassistant.core import callback
from homeassistant.helpers.selector import (
    SelectSelector,
    SelectSelectorConfig,
    SelectSelectorMode,
    TextSelector,
)

from .const import (
    CONF_ACTIVE_COLOR,
    CONF_IDLE_COLOR,
    CONF_ZWAVE_DOMAIN,
    DEFAULT_ZWAVE_DOMAIN,
    DOMAIN,
)
from .models import DEFAULT_ACTIVE_COLOR, DEFAULT_IDLE_COLOR, LedColor

COLOR_OPTIONS = [
    {"value": color.name.lower(), "label": color.label} for color in LedColor
]


def _color_selector() -> SelectSelector:
    """Return a dropdown over the LED palette."""
    return SelectSelector(
        SelectSelectorConfig(
            options=COLOR_OPTIONS,
            mode=SelectSelectorMode.DROPDOWN,
        )
    )


def _colors_schema(idle_color: str, active_color: str) -> dict[vol.Marker, Any]:
    """Return the color fields with the given defaults."""
    return {
        vol.Required(CONF_IDLE_COLOR, default=idle_color): _color_selector(),
        vol.Required(CONF_ACTIVE_COLOR, default=active_color): _color_selector(),
    }


class IdleLightColorsConfigFlow(ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Idle Light Colors."""

    VERSION = 1
    MINOR_VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Handle the initial step."""
        # Only allow a single config entry
        if self._async_current_entries():
            return self.async_abort(reason="single_instance_allowed")

        if user_input is not None:
            return self.async_create_entry(
                title="Idle Light Colors",
                data={
                    CONF_ZWAVE_DOMAIN: user_input.get(
                        CONF_ZWAVE_DOMAIN, DEFAULT_ZWAVE_DOMAIN
                    ).strip(),
                },
                options={
                    CONF_IDLE_COLOR: user_input.get(
                        CONF_IDLE_COLOR, DEFAULT_IDLE_COLOR.name.lower()
                    ),
                    CONF_ACTIVE_COLOR: user_input.get(
                        CONF_ACTIVE_COLOR, DEFAULT_ACTIVE_COLOR.name.lower()
                    ),
                },
            )

        return self.async_show_form(
            step_id="user",
            data_schema=vol.Schema(
                {
                    vol.Required(
                        CONF_ZWAVE_DOMAIN, default=DEFAULT_ZWAVE_DOMAIN
                    ): TextSelector(),
                    **_colors_schema(
                        DEFAULT_IDLE_COLOR.name.lower(),
                        DEFAULT_ACTIVE_COLOR.name.lower(),
                    ),
                }
            ),
        )

    @staticmethod
    @callback
    def async_get_options_flow(
        config_entry: ConfigFlow,
    ) -> OptionsFlow:
        """Get the options flow for this handler."""
        return IdleLightColorsOptionsFlow()


class IdleLightColorsOptionsFlow(OptionsFlow):
    """Handle options flow for Idle Light Colors."""

    async def async_step_init(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Manage the LED colors."""
        if user_input is not None:
            return self.async_create_entry(title="", data=user_input)

        return self.async_show_form(
            step_id="init",
            data_schema=vol.Schema(
                _colors_schema(
                    self.config_entry.options.get(
                        CONF_IDLE_COLOR, DEFAULT_IDLE_COLOR.name.lower()
                    ),
                    self.config_entry.options.get(
                        CONF_ACTIVE_COLOR, DEFAULT_ACTIVE_COLOR.name.lower()
                    ),
                )
            ),
        )
