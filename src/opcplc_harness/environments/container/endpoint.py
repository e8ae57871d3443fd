"""Container engine endpoint resolution.

Maps the host platform to the address of the local container engine. This is
pure classification: nothing here touches the network.
"""

from __future__ import annotations

import sys

from opcplc_harness.types.container import EndpointKind, EngineEndpoint

from .defaults import LINUX_ENGINE_URL, WINDOWS_ENGINE_URL
from .errors import UnsupportedPlatformError


def classify_platform(platform: str | None = None) -> EngineEndpoint:
    """Classify a platform into an engine endpoint.

    Args:
        platform: Platform string in ``sys.platform`` form. Defaults to the host platform.

    Returns:
        EngineEndpoint, with kind UNSUPPORTED for platforms without a known endpoint (e.g., darwin).
    """
    platform = platform if platform is not None else sys.platform

    if platform == "win32":
        return EngineEndpoint(platform=platform, kind=EndpointKind.TCP, url=WINDOWS_ENGINE_URL)
    if platform.startswith("linux"):
        return EngineEndpoint(platform=platform, kind=EndpointKind.UNIX, url=LINUX_ENGINE_URL)
    return EngineEndpoint(platform=platform, kind=EndpointKind.UNSUPPORTED)


def resolve_engine_endpoint(platform: str | None = None) -> EngineEndpoint:
    """Resolve the engine endpoint for a platform.

    Raises:
        UnsupportedPlatformError: If the platform has no known endpoint.
    """
    endpoint = classify_platform(platform)
    if not endpoint.is_supported:
        raise UnsupportedPlatformError(endpoint)
    return endpoint


__all__ = [
    "classify_platform",
    "resolve_engine_endpoint",
]
