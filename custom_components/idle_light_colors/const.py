"""Constants for Idle Light Colors."""

from __future__ import annotations

from typing import Final

DOMAIN: Final = "idle_light_colors"

# Config entry data / options
CONF_ZWAVE_DOMAIN: Final = "zwave_domain"
CONF_IDLE_COLOR: Final = "idle_color"
CONF_ACTIVE_COLOR: Final = "active_color"

DEFAULT_ZWAVE_DOMAIN: Final = "zwave"

# Reconciliation
DEFAULT_RECONCILE_DEBOUNCE: Final = 1.0  # seconds to settle color edits
DEFAULT_CALL_TIMEOUT: Final = 30  # seconds per downstream call

# Power levels below this count as off
POWER_LEVEL_TOLERANCE: Final = 0.1

# Event types
EVENT_FATAL: Final = f"{DOMAIN}_fatal"

# Downstream configuration operations
OP_SET_PARAMETER_VALUE: Final = "set_device_parameter_value"
OP_CONFIGURATION_SET: Final = "configuration_set"
LEGACY_INSTANCE: Final = ""
ATTR_ARGS: Final = "args"
ATTR_RESULT: Final = "result"

# Downstream major versions
ZWAVE_VERSION_LEGACY: Final = 3
ZWAVE_VERSION_HS4: Final = 4

# Device metadata keys
META_MANUFACTURER_ID: Final = "manufacturer_id"
META_PROD_ID: Final = "manufacturer_prod_id"
META_PROD_TYPE: Final = "manufacturer_prod_type"
META_RELATIONSHIP: Final = "relationship"
META_COMMAND_CLASS: Final = "commandclass"

# Device relationship of a value-bearing child entity
RELATIONSHIP_CHILD: Final = 4

# HomeSeer WD200 family
MANUFACTURER_HOMESEER: Final = 0x000C
PROD_TYPE_HOMESEER_SWITCH: Final = 0x4447
PROD_ID_WS200: Final = 0x3035
PROD_ID_WD200: Final = 0x3036
PROD_ID_WX300: Final = 0x4036
SUPPORTED_PROD_IDS: Final = frozenset({PROD_ID_WS200, PROD_ID_WD200, PROD_ID_WX300})

# Z-Wave Command Classes
CC_BINARY_SWITCH: Final = 37
CC_MULTILEVEL_SWITCH: Final = 38
SUPPORTED_COMMAND_CLASSES: Final = frozenset({CC_BINARY_SWITCH, CC_MULTILEVEL_SWITCH})

# Normal mode LED color parameter is a single byte
LED_COLOR_PARAM_SIZE: Final = 1

# Z-Wave dimmer level range
ZWAVE_LEVEL_MAX: Final = 99
