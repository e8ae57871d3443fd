"""Container engine abstraction for the OPC PLC harness.

This package provides a Protocol for container engines and a Docker implementation.
"""

from __future__ import annotations

from collections.abc import Callable

from opcplc_harness.types.container import EngineEndpoint

from .docker import DockerBackend
from .protocol import ContainerEngine

EngineFactory = Callable[[EngineEndpoint], ContainerEngine]


def get_default_engine_factory() -> EngineFactory:
    """Get the default engine factory (Docker CLI)."""
    return DockerBackend.for_endpoint


__all__ = [
    "ContainerEngine",
    "DockerBackend",
    "EngineFactory",
    "get_default_engine_factory",
]
