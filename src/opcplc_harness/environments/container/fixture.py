"""Acquire/release lifecycle of the OPC PLC simulator container.

This module provides the PlcServer class, which composes endpoint resolution,
the engine connection, stale-container reaping, image retrieval and container
provisioning into one acquire/release pair for test setup and teardown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from opcplc_harness.core.utils import logger, setup_opcplc_logging
from opcplc_harness.types.container import FixtureState

from .config import get_settings
from .connection import EngineConnection
from .endpoint import resolve_engine_endpoint
from .errors import FixtureStateError, PlcHarnessError
from .images import ensure_image
from .provisioner import build_container_spec, provision_container
from .reaper import reap

if TYPE_CHECKING:
    from types import TracebackType

    from opcplc_harness.types.container import ContainerHandle

    from .backend import EngineFactory
    from .config import PlcSettings


class PlcServer:
    """Runs the OPC PLC simulator container for the lifetime of a test scope.

    ``acquire`` moves the fixture from idle to active: resolve the engine
    endpoint, connect, reap stale PLC containers, pull the image, then create and
    start the container. Any failure leaves the fixture failed; a failed
    fixture cannot be acquired again.

    ``release`` reaps by image again rather than removing the owned handle, so
    any other container of the same image is removed too. It is a no-op when no
    connection is held, which makes it safe before acquire and on repeat calls.

    Args:
        settings: PLC settings. If None, uses the environment-backed defaults.
        platform: Host platform override in ``sys.platform`` form. If None, uses the host.
        engine_factory: Builds the engine backend for the endpoint. If None, uses Docker.

    Example:
        >>> with PlcServer() as handle:
        ...     print(f"PLC running in container {handle.id}")
    """

    def __init__(
        self,
        *,
        settings: PlcSettings | None = None,
        platform: str | None = None,
        engine_factory: EngineFactory | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.platform = platform
        self.engine_factory = engine_factory
        self.state = FixtureState.IDLE
        self.connection: EngineConnection | None = None
        self.handle: ContainerHandle | None = None

        # Logging must be ready before the fixture logs anything
        setup_opcplc_logging(self.settings.log_level)

    @property
    def is_running(self) -> bool:
        return self.state == FixtureState.ACTIVE and self.handle is not None

    def acquire(self) -> ContainerHandle:
        """Provision the PLC container.

        Returns:
            Handle of the running container.

        Raises:
            FixtureStateError: If the fixture is not idle.
            PlcHarnessError: If any provisioning step fails.
        """
        if self.state != FixtureState.IDLE:
            raise FixtureStateError(f"PLC fixture cannot be acquired from state '{self.state}'")

        image = self.settings.image_ref
        try:
            endpoint = resolve_engine_endpoint(self.platform)
            self.connection = EngineConnection.open(endpoint, engine_factory=self.engine_factory)

            logger.info(f"Cleaning up stale containers of image {image.name}")
            self._reap(self.connection)

            image_os = ensure_image(self.connection, image)
            spec = build_container_spec(self.settings, image_os)
            self.handle = provision_container(self.connection, spec)
        except Exception:
            self.state = FixtureState.FAILED
            raise

        self.state = FixtureState.ACTIVE
        logger.info(f"PLC container {self.handle.name} running ({self.handle.id}) on port {self.settings.port}")
        return self.handle

    def release(self) -> None:
        """Reap the PLC containers and drop the engine connection.

        Local state is cleared before reaping, so a second call performs no
        engine operations even if the first one raised.
        """
        connection = self.connection
        if connection is None:
            return

        self.connection = None
        self.handle = None
        if self.state == FixtureState.ACTIVE:
            self.state = FixtureState.RELEASED

        logger.info(f"Releasing PLC containers of image {self.settings.image}")
        try:
            self._reap(connection)
        finally:
            connection.close()

    def _reap(self, connection: EngineConnection) -> list[str]:
        return reap(
            connection,
            self.settings.image_ref,
            limit=self.settings.reap_limit,
            continue_on_error=self.settings.reap_continue_on_error,
        )

    def __enter__(self) -> ContainerHandle:
        try:
            return self.acquire()
        except Exception:
            try:
                self.release()
            except PlcHarnessError as cleanup_error:
                logger.warning(f"Cleanup after failed acquire also failed: {cleanup_error}")
            raise

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"PlcServer(state={self.state!s}, handle={self.handle!r})"


__all__ = ["PlcServer"]
