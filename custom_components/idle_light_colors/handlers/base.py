"""Base class for configuration call handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..api import ZWaveConfigClient
    from ..models import AdapterMode


class ParameterSetHandler(ABC):
    """Abstract base class for one calling convention of "set parameter".

    A handler owns the shape of the downstream call and the normalization of
    its result. It performs no state transitions.
    """

    @property
    @abstractmethod
    def mode(self) -> AdapterMode:
        """Return the adapter mode this handler serves."""

    @abstractmethod
    def build_call(
        self,
        home_id: str,
        node_id: int,
        parameter: int,
        size: int,
        value: int,
    ) -> tuple[str, tuple[Any, ...]]:
        """Return the operation name and arguments for the call."""

    @abstractmethod
    def normalize_result(self, result: Any | None) -> str | None:
        """Convert a raw call result to a description.

        Returns None only when the result means the convention itself is not
        supported by the integration.
        """

    async def async_set_parameter(
        self,
        client: ZWaveConfigClient,
        home_id: str,
        node_id: int,
        parameter: int,
        size: int,
        value: int,
    ) -> str | None:
        """Set a configuration parameter on a node."""
        operation, args = self.build_call(home_id, node_id, parameter, size, value)
        result = await client.async_call(operation, args)
        return self.normalize_result(result)
