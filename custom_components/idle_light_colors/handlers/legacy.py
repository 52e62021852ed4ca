"""Handlers for Z-Wave integrations of the 3.x line."""

from __future__ import annotations

from typing import Any

from ..const import LEGACY_INSTANCE, OP_CONFIGURATION_SET, OP_SET_PARAMETER_VALUE
from ..models import AdapterMode, ConfigResult
from .base import ParameterSetHandler


def _describe_config_result(result: Any) -> str:
    """Render a ConfigResult code the way the modern calls report results."""
    if isinstance(result, ConfigResult):
        return result.name.title()
    if isinstance(result, str):
        try:
            return ConfigResult[result.upper()].name.title()
        except KeyError:
            return result
    try:
        return ConfigResult(int(result)).name.title()
    except (TypeError, ValueError):
        return f"Unknown ({result})"


class LegacyHandler(ParameterSetHandler):
    """Modern operation invoked through the instance-qualified legacy form.

    Builds that predate the operation answer with no result at all.
    """

    @property
    def mode(self) -> AdapterMode:
        """Return the adapter mode this handler serves."""
        return AdapterMode.LEGACY

    def build_call(
        self,
        home_id: str,
        node_id: int,
        parameter: int,
        size: int,
        value: int,
    ) -> tuple[str, tuple[Any, ...]]:
        """Return the operation name and arguments for the call."""
        return OP_SET_PARAMETER_VALUE, (
            LEGACY_INSTANCE,
            home_id,
            node_id,
            parameter,
            size,
            value,
        )

    def normalize_result(self, result: Any | None) -> str | None:
        """Convert a raw call result to a description."""
        if result is None:
            return None
        if isinstance(result, str):
            return result
        return _describe_config_result(result)


class LegacyPreParamHandler(ParameterSetHandler):
    """The configuration_set operation of builds without parameter values."""

    @property
    def mode(self) -> AdapterMode:
        """Return the adapter mode this handler serves."""
        return AdapterMode.LEGACY_PRE_PARAM

    def build_call(
        self,
        home_id: str,
        node_id: int,
        parameter: int,
        size: int,
        value: int,
    ) -> tuple[str, tuple[Any, ...]]:
        """Return the operation name and arguments for the call."""
        return OP_CONFIGURATION_SET, (
            LEGACY_INSTANCE,
            home_id,
            node_id,
            parameter,
            size,
            value,
        )

    def normalize_result(self, result: Any | None) -> str:
        """Convert a raw call result to a description."""
        if result is None:
            return "No result"
        return _describe_config_result(result)
