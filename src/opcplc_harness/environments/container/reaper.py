"""Stale PLC container cleanup.

Reaping works on what the engine lists, not on handles, so it also recovers
containers left behind by a crashed run. Only the most recently created
containers are inspected; older leaked containers are not found.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from opcplc_harness.core.utils import logger

from .defaults import REAP_LIST_LIMIT
from .errors import EngineCommandError, PlcHarnessError, ReapError, RemoveError, StopError

if TYPE_CHECKING:
    from opcplc_harness.types.container import ImageReference

    from .connection import EngineConnection


def reap(
    connection: EngineConnection,
    image: ImageReference,
    *,
    limit: int = REAP_LIST_LIMIT,
    continue_on_error: bool = False,
) -> list[str]:
    """Stop and remove every recent container created from ``image``.

    A container matches when its engine-reported image string equals
    ``image.name`` or ``image.pull_ref`` exactly. Does nothing when no container matches.

    By default the pass aborts on the first stop or remove failure, which can
    leave other stale containers behind. With ``continue_on_error`` every
    candidate is attempted and the failures are raised together at the end.

    Args:
        connection: Open engine connection.
        image: Image whose containers are reaped.
        limit: Number of most recently created containers to inspect.
        continue_on_error: Attempt every candidate before reporting failures.

    Returns:
        Ids of the containers that were removed.

    Raises:
        ReapError: If the listing fails, or (best-effort mode) if any candidate failed.
        StopError: If a container cannot be stopped (default mode).
        RemoveError: If a container cannot be removed (default mode).
    """
    engine = connection.engine

    try:
        containers = engine.list_containers(limit=limit)
    except EngineCommandError as e:
        raise ReapError(image) from e

    candidates = [c for c in containers if image.matches(c.image)]
    if not candidates:
        logger.debug(f"No stale containers of image {image.name} among the last {limit}")
        return []

    removed: list[str] = []
    failures: list[PlcHarnessError] = []
    for container in candidates:
        logger.info(f"Removing stale PLC container {container.id} ({container.state or 'unknown state'})")
        try:
            _stop_and_remove(connection, container.id)
        except (StopError, RemoveError) as e:
            if not continue_on_error:
                raise
            logger.warning(str(e))
            failures.append(e)
            continue
        removed.append(container.id)

    if failures:
        raise ReapError(image, failures)
    return removed


def _stop_and_remove(connection: EngineConnection, container_id: str) -> None:
    engine = connection.engine
    try:
        engine.stop_container(container_id=container_id)
    except EngineCommandError as e:
        raise StopError(container_id) from e
    try:
        engine.remove_container(container_id=container_id)
    except EngineCommandError as e:
        raise RemoveError(container_id) from e


__all__ = ["reap"]
