"""PLC simulator image retrieval."""

from __future__ import annotations

from typing import TYPE_CHECKING

from opcplc_harness.core.utils import logger
from opcplc_harness.types.container import ImageOs

from .errors import EngineCommandError, InspectError, PullError

if TYPE_CHECKING:
    from opcplc_harness.types.container import ImageReference

    from .connection import EngineConnection


def ensure_image(connection: EngineConnection, image: ImageReference) -> ImageOs:
    """Pull the image tag and report the image's OS family.

    The pull always happens, whether or not the image is present locally, so
    every run either refreshes the image or fails.

    Args:
        connection: Open engine connection.
        image: Image to pull.

    Returns:
        OS family of the pulled image.

    Raises:
        PullError: If the pull fails.
        InspectError: If the pulled image cannot be inspected.
    """
    engine = connection.engine

    logger.info(f"Pulling image {image.pull_ref}")
    try:
        engine.pull_image(name=image.name, tag=image.tag)
    except EngineCommandError as e:
        raise PullError(image) from e

    try:
        reported = engine.inspect_image_os(name=image.pull_ref)
    except EngineCommandError as e:
        raise InspectError(image) from e

    image_os = ImageOs.parse(reported)
    logger.info(f"Image {image.pull_ref} targets OS '{image_os}'")
    return image_os


__all__ = ["ensure_image"]
