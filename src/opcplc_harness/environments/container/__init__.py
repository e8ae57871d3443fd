"""Container management for the OPC PLC simulator.

This package provides utilities for provisioning the PLC simulator container,
cleaning up stale instances and tearing it down after a test run.
"""

from .backend import ContainerEngine, DockerBackend, EngineFactory, get_default_engine_factory
from .config import PlcSettings, get_settings
from .connection import EngineConnection
from .endpoint import classify_platform, resolve_engine_endpoint
from .errors import (
    CreateError,
    EngineCommandError,
    EngineConnectionError,
    FixtureStateError,
    InspectError,
    PlcHarnessError,
    PullError,
    ReapError,
    RemoveError,
    StartError,
    StopError,
    UnsupportedPlatformError,
)
from .fixture import PlcServer
from .images import ensure_image
from .provisioner import build_container_spec, provision_container
from .reaper import reap

__all__ = [
    "ContainerEngine",
    "CreateError",
    "DockerBackend",
    "EngineCommandError",
    "EngineConnection",
    "EngineConnectionError",
    "EngineFactory",
    "FixtureStateError",
    "InspectError",
    "PlcHarnessError",
    "PlcServer",
    "PlcSettings",
    "PullError",
    "ReapError",
    "RemoveError",
    "StartError",
    "StopError",
    "UnsupportedPlatformError",
    "build_container_spec",
    "classify_platform",
    "ensure_image",
    "get_default_engine_factory",
    "get_settings",
    "provision_container",
    "reap",
    "resolve_engine_endpoint",
]
