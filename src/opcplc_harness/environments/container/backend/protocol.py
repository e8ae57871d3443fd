"""Container engine protocol definition.

Defines the engine operations the lifecycle components need, so they can be
backed by different container runtimes or by an in-memory fake in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from opcplc_harness.types.container import ContainerSpec, ContainerSummary


class ContainerEngine(Protocol):
    """Protocol for container engine implementations.

    Every call blocks until the engine has completed the operation. Failures are
    reported by raising ``EngineCommandError``.
    """

    def ping(self) -> None:
        """Check that the engine answers at its endpoint."""
        ...

    def list_containers(self, *, limit: int) -> list[ContainerSummary]:
        """List the most recently created containers, in any state.

        Args:
            limit: Maximum number of containers to return.

        Returns:
            Container summaries, newest first.
        """
        ...

    def stop_container(self, *, container_id: str) -> None:
        """Stop a container."""
        ...

    def remove_container(self, *, container_id: str) -> None:
        """Remove a stopped container."""
        ...

    def pull_image(self, *, name: str, tag: str) -> None:
        """Pull ``name:tag`` from its registry."""
        ...

    def inspect_image_os(self, *, name: str) -> str:
        """Return the OS family the engine reports for a local image (e.g., "linux")."""
        ...

    def create_container(self, *, spec: ContainerSpec) -> str:
        """Create (but do not start) a container.

        Args:
            spec: Container specification.

        Returns:
            Engine-assigned container id.
        """
        ...

    def start_container(self, *, container_id: str) -> None:
        """Start a created container."""
        ...


__all__ = ["ContainerEngine"]
