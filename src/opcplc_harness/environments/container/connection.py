"""Session with the container engine.

A connection is opened once per fixture and shared by reference with the
reaper, image provisioner and container provisioner. It is never reconnected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from opcplc_harness.core.utils import logger

from .backend import get_default_engine_factory
from .errors import EngineCommandError, EngineConnectionError, UnsupportedPlatformError

if TYPE_CHECKING:
    from opcplc_harness.types.container import EngineEndpoint

    from .backend import ContainerEngine, EngineFactory


class EngineConnection:
    """Live session against a container engine endpoint.

    Use ``EngineConnection.open`` rather than the constructor: it verifies the
    engine is reachable before handing out the session.

    Args:
        endpoint: Resolved engine endpoint.
        engine: Engine backend bound to the endpoint.
    """

    def __init__(self, endpoint: EngineEndpoint, engine: ContainerEngine) -> None:
        self.endpoint = endpoint
        self._engine: ContainerEngine | None = engine

    @classmethod
    def open(cls, endpoint: EngineEndpoint, *, engine_factory: EngineFactory | None = None) -> EngineConnection:
        """Open a session against an endpoint.

        Args:
            endpoint: Resolved engine endpoint.
            engine_factory: Builds the engine backend for the endpoint. Defaults to Docker.

        Returns:
            An open EngineConnection.

        Raises:
            UnsupportedPlatformError: If the endpoint is the unsupported classification.
            EngineConnectionError: If the engine does not answer at the endpoint.
        """
        if not endpoint.is_supported:
            raise UnsupportedPlatformError(endpoint)

        factory = engine_factory or get_default_engine_factory()
        logger.info(f"Connecting to container engine at {endpoint}")
        try:
            engine = factory(endpoint)
            engine.ping()
        except (EngineCommandError, OSError, ValueError) as e:
            raise EngineConnectionError(endpoint, reason=str(e)) from e

        return cls(endpoint, engine)

    @property
    def engine(self) -> ContainerEngine:
        if self._engine is None:
            raise EngineConnectionError(self.endpoint, reason="connection is closed")
        return self._engine

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def close(self) -> None:
        """Drop the engine session. Closing twice is harmless."""
        if self._engine is not None:
            logger.debug(f"Closing container engine connection to {self.endpoint}")
        self._engine = None

    def __repr__(self) -> str:
        state = "open" if self.is_open else "closed"
        return f"EngineConnection(endpoint={self.endpoint!s}, {state})"


__all__ = ["EngineConnection"]
