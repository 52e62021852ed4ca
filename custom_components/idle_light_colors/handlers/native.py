"""Handler for Z-Wave integrations of the 4.x line."""

from __future__ import annotations

from typing import Any

from ..const import OP_SET_PARAMETER_VALUE
from ..models import AdapterMode
from .base import ParameterSetHandler


class HS4NativeHandler(ParameterSetHandler):
    """Modern calling convention, answered with a string result."""

    @property
    def mode(self) -> AdapterMode:
        """Return the adapter mode this handler serves."""
        return AdapterMode.HS4_NATIVE

    def build_call(
        self,
        home_id: str,
        node_id: int,
        parameter: int,
        size: int,
        value: int,
    ) -> tuple[str, tuple[Any, ...]]:
        """Return the operation name and arguments for the call."""
        return OP_SET_PARAMETER_VALUE, (home_id, node_id, parameter, size, value)

    def normalize_result(self, result: Any | None) -> str:
        """Convert a raw call result to a description."""
        if result is None:
            return "No result"
        if isinstance(result, str):
            return result
        return str(result)
