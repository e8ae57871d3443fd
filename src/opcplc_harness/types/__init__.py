"""Type definitions for the OPC PLC harness."""

from .container import (
    ContainerHandle,
    ContainerSpec,
    ContainerSummary,
    EndpointKind,
    EngineEndpoint,
    FixtureState,
    ImageOs,
    ImageReference,
    PortBinding,
)

__all__ = [
    "ContainerHandle",
    "ContainerSpec",
    "ContainerSummary",
    "EndpointKind",
    "EngineEndpoint",
    "FixtureState",
    "ImageOs",
    "ImageReference",
    "PortBinding",
]
