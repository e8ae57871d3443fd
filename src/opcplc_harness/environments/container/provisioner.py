"""PLC simulator container creation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from opcplc_harness.core.utils import logger
from opcplc_harness.types.container import ContainerHandle, ContainerSpec, ImageOs, PortBinding

from .defaults import AUTO_ACCEPT_CERTS_FLAG, CERT_STORE_TYPE_FLAG, PORT_FLAG, WINDOWS_CERT_STORE_TYPE
from .errors import CreateError, EngineCommandError, StartError

if TYPE_CHECKING:
    from .config import PlcSettings
    from .connection import EngineConnection


def build_container_spec(settings: PlcSettings, image_os: ImageOs) -> ContainerSpec:
    """Build the PLC container specification.

    The container port is published on the identical host port. Windows images
    additionally get an X509Store certificate store, because they cannot access
    private keys kept in a directory store.

    Args:
        settings: PLC settings.
        image_os: OS family of the pulled image.

    Returns:
        ContainerSpec for the PLC container.
    """
    command = [AUTO_ACCEPT_CERTS_FLAG, PORT_FLAG, str(settings.port)]
    if image_os == ImageOs.WINDOWS:
        command.extend([CERT_STORE_TYPE_FLAG, WINDOWS_CERT_STORE_TYPE])

    return ContainerSpec(
        image=settings.image_ref.pull_ref,
        name=settings.container_name,
        hostname=settings.hostname,
        ports=(PortBinding(container_port=settings.port, host_port=settings.port),),
        command=tuple(command),
    )


def provision_container(connection: EngineConnection, spec: ContainerSpec) -> ContainerHandle:
    """Create and start a container.

    If the start fails, the created container is left in place for the next
    reap to collect.

    Raises:
        CreateError: If the container cannot be created.
        StartError: If the created container cannot be started.
    """
    engine = connection.engine

    logger.info(f"Creating container {spec.name} (image: {spec.image}, command: {' '.join(spec.command)})")
    try:
        container_id = engine.create_container(spec=spec)
    except EngineCommandError as e:
        raise CreateError(spec.image, spec.name) from e

    logger.info(f"Starting container {spec.name} ({container_id})")
    try:
        engine.start_container(container_id=container_id)
    except EngineCommandError as e:
        raise StartError(container_id) from e

    return ContainerHandle(id=container_id, name=spec.name)


__all__ = [
    "build_container_spec",
    "provision_container",
]
