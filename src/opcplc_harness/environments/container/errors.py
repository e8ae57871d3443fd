"""Errors raised while managing the PLC simulator container.

Every error is terminal for the acquire or release sequence in progress and
carries the context (endpoint, image, container id) needed to diagnose it
without reading engine logs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from opcplc_harness.types.container import EngineEndpoint, ImageReference


class EngineCommandError(RuntimeError):
    """A container engine command failed.

    Raised by backends. Components wrap it into one of the errors below.

    Args:
        command: The command that was executed.
        stderr: Error output reported by the engine.
        returncode: Exit code, if the command ran at all.
    """

    def __init__(self, command: list[str], stderr: str = "", returncode: int | None = None) -> None:
        self.command = command
        self.stderr = stderr.strip()
        self.returncode = returncode
        detail = f": {self.stderr}" if self.stderr else ""
        super().__init__(f"Engine command failed ({' '.join(command)}){detail}")


class PlcHarnessError(Exception):
    """Base class for all lifecycle errors."""


class EngineConnectionError(PlcHarnessError, ConnectionError):
    """The container engine cannot be reached at the resolved endpoint."""

    def __init__(self, endpoint: EngineEndpoint, reason: str = "") -> None:
        self.endpoint = endpoint
        message = f"Cannot connect to the container engine at '{endpoint}'. Please adjust your engine endpoint."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnsupportedPlatformError(EngineConnectionError):
    """The host platform has no known container engine endpoint."""

    def __init__(self, endpoint: EngineEndpoint) -> None:
        self.platform = endpoint.platform
        super().__init__(endpoint, reason=f"platform '{endpoint.platform}' is not supported")


class PullError(PlcHarnessError):
    def __init__(self, image: ImageReference) -> None:
        self.image = image
        super().__init__(f"Cannot pull image '{image.pull_ref}'")


class InspectError(PlcHarnessError):
    def __init__(self, image: ImageReference) -> None:
        self.image = image
        super().__init__(f"Cannot inspect image '{image.pull_ref}'")


class CreateError(PlcHarnessError):
    def __init__(self, image: str, container_name: str) -> None:
        self.image = image
        self.container_name = container_name
        super().__init__(f"Cannot create the PLC container '{container_name}' from image '{image}'")


class StartError(PlcHarnessError):
    def __init__(self, container_id: str) -> None:
        self.container_id = container_id
        super().__init__(f"Cannot start the PLC container with id '{container_id}'")


class StopError(PlcHarnessError):
    def __init__(self, container_id: str) -> None:
        self.container_id = container_id
        super().__init__(f"Cannot stop the PLC container with id '{container_id}'")


class RemoveError(PlcHarnessError):
    def __init__(self, container_id: str) -> None:
        self.container_id = container_id
        super().__init__(f"Cannot remove the PLC container with id '{container_id}'")


class ReapError(PlcHarnessError):
    """Stale containers could not be listed or some of them could not be removed.

    Attributes:
        image: Image whose containers were being reaped.
        errors: Individual stop/remove failures (best-effort mode only).
    """

    def __init__(self, image: ImageReference, errors: list[PlcHarnessError] | None = None) -> None:
        self.image = image
        self.errors = errors or []
        if self.errors:
            ids = ", ".join(getattr(e, "container_id", "?") for e in self.errors)
            message = f"Cannot clean up {len(self.errors)} container(s) of image '{image.name}': {ids}"
        else:
            message = f"Cannot list containers of image '{image.name}'"
        super().__init__(message)


class FixtureStateError(PlcHarnessError):
    """A fixture was used outside of its Idle -> Active -> released lifecycle."""


__all__ = [
    "CreateError",
    "EngineCommandError",
    "EngineConnectionError",
    "FixtureStateError",
    "InspectError",
    "PlcHarnessError",
    "PullError",
    "ReapError",
    "RemoveError",
    "StartError",
    "StopError",
    "UnsupportedPlatformError",
]
