"""Configuration call handlers for Idle Light Colors."""

from __future__ import annotations

from .base import ParameterSetHandler
from .legacy import LegacyHandler, LegacyPreParamHandler
from .native import HS4NativeHandler
from .registry import HandlerRegistry

__all__ = [
    "HandlerRegistry",
    "HS4NativeHandler",
    "LegacyHandler",
    "LegacyPreParamHandler",
    "ParameterSetHandler",
]
