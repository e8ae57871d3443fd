"""Container-related type definitions for the OPC PLC harness."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class EndpointKind(StrEnum):
    """Transport used to reach the container engine."""

    TCP = "tcp"
    UNIX = "unix"
    UNSUPPORTED = "unsupported"


class ImageOs(StrEnum):
    """Operating system family reported by the engine for an image."""

    LINUX = "linux"
    WINDOWS = "windows"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str) -> ImageOs:
        """Parse an engine-reported OS string, ignoring case and whitespace."""
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return cls.UNKNOWN


class FixtureState(StrEnum):
    """Lifecycle state of a PlcServer fixture."""

    IDLE = "idle"
    ACTIVE = "active"
    FAILED = "failed"
    RELEASED = "released"


class EngineEndpoint(BaseModel):
    """Platform-tagged address of the container engine.

    Attributes:
        platform: Host platform the endpoint was resolved for (e.g., "linux").
        kind: Transport kind.
        url: Engine address (e.g., "unix:///var/run/docker.sock"), None when unsupported.
    """

    model_config = ConfigDict(frozen=True)

    platform: str = Field(description="Host platform the endpoint was resolved for")
    kind: EndpointKind = Field(description="Transport kind")
    url: str | None = Field(default=None, description="Engine address, None when unsupported")

    @property
    def is_supported(self) -> bool:
        return self.kind != EndpointKind.UNSUPPORTED and self.url is not None

    def __str__(self) -> str:
        return self.url or f"<unsupported platform '{self.platform}'>"


class ImageReference(BaseModel):
    """Name and tag of a container image.

    Matching against engine listings is an exact string comparison with either
    ``name`` or ``name:tag``. Containers are created from ``name:tag``; the bare
    name covers containers created from the untagged name. Other tags, digests
    and case variants do not match.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Image repository name")
    tag: str = Field(default="latest", description="Image tag")

    @property
    def pull_ref(self) -> str:
        return f"{self.name}:{self.tag}"

    def matches(self, reported: str) -> bool:
        return reported in (self.name, self.pull_ref)

    def __str__(self) -> str:
        return self.pull_ref


class PortBinding(BaseModel):
    """A container port published on a host port."""

    model_config = ConfigDict(frozen=True)

    container_port: int = Field(description="Port exposed inside the container")
    host_port: int = Field(description="Port bound on the host")
    protocol: str = Field(default="tcp", description="Transport protocol")

    @property
    def key(self) -> str:
        """Engine port key, e.g. "50000/tcp"."""
        return f"{self.container_port}/{self.protocol}"


class ContainerSpec(BaseModel):
    """Declarative description submitted to the engine to create a container.

    Attributes:
        image: Image reference the container is created from.
        name: Container name.
        hostname: Hostname inside the container.
        ports: Published port bindings.
        command: Arguments passed to the image entrypoint.
    """

    model_config = ConfigDict(frozen=True)

    image: str = Field(description="Image reference the container is created from")
    name: str = Field(description="Container name")
    hostname: str = Field(description="Hostname inside the container")
    ports: tuple[PortBinding, ...] = Field(default=(), description="Published port bindings")
    command: tuple[str, ...] = Field(default=(), description="Arguments passed to the image entrypoint")


class ContainerSummary(BaseModel):
    """One row of an engine container listing."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Engine-assigned container id")
    image: str = Field(description="Image string as reported by the engine")
    names: tuple[str, ...] = Field(default=(), description="Container names")
    state: str = Field(default="", description="Engine-reported state (running, exited, created, ...)")


class ContainerHandle(BaseModel):
    """Handle to a container created by a fixture."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Engine-assigned container id")
    name: str = Field(description="Container name")


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
