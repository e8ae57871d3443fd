"""Docker backend implementation.

Uses the docker CLI, pointed at an explicit engine endpoint with ``--host``.
"""

from __future__ import annotations

import json
import subprocess
from typing import TYPE_CHECKING

from opcplc_harness.core.utils import logger
from opcplc_harness.types.container import ContainerSummary

from ..errors import EngineCommandError

if TYPE_CHECKING:
    from opcplc_harness.types.container import ContainerSpec, EngineEndpoint


class DockerBackend:
    """Docker implementation of ContainerEngine.

    Args:
        host: Engine address passed to ``docker --host`` (e.g., "unix:///var/run/docker.sock").
        docker_bin: Docker executable name or path.
    """

    def __init__(self, host: str, docker_bin: str = "docker") -> None:
        self.host = host
        self.docker_bin = docker_bin

    @classmethod
    def for_endpoint(cls, endpoint: EngineEndpoint) -> DockerBackend:
        """Create a backend bound to a resolved endpoint."""
        if endpoint.url is None:
            raise ValueError(f"Endpoint for platform '{endpoint.platform}' has no address")
        return cls(host=endpoint.url)

    def _run(self, *args: str) -> str:
        """Run a docker command against the bound host and return its stdout.

        No timeout is applied: a hung engine blocks the caller.
        """
        cmd = [self.docker_bin, "--host", self.host, *args]
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise EngineCommandError(cmd, "Docker command not found. Is Docker installed?") from e

        if result.returncode != 0:
            raise EngineCommandError(cmd, result.stderr, result.returncode)
        return result.stdout

    def ping(self) -> None:
        """Check that the Docker daemon answers."""
        self._run("version", "--format", "{{.Server.Version}}")

    def list_containers(self, *, limit: int) -> list[ContainerSummary]:
        """List the most recently created Docker containers, in any state."""
        args = ("ps", "--all", "--last", str(limit), "--no-trunc", "--format", "{{json .}}")
        output = self._run(*args)

        containers: list[ContainerSummary] = []
        for line in output.splitlines():
            line = line.strip()
            if not line:
                continue
            # Format: {"ID":"...","Image":"...","Names":"a,b","State":"running",...}
            try:
                row = json.loads(line)
                summary = ContainerSummary(
                    id=row["ID"],
                    image=row.get("Image", ""),
                    names=tuple(n for n in row.get("Names", "").split(",") if n),
                    state=row.get("State", ""),
                )
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                raise EngineCommandError(
                    [self.docker_bin, "--host", self.host, *args], f"Unexpected container listing line: {line}"
                ) from e
            containers.append(summary)
        return containers

    def stop_container(self, *, container_id: str) -> None:
        self._run("stop", container_id)

    def remove_container(self, *, container_id: str) -> None:
        self._run("rm", container_id)

    def pull_image(self, *, name: str, tag: str) -> None:
        self._run("pull", "--quiet", f"{name}:{tag}")

    def inspect_image_os(self, *, name: str) -> str:
        return self._run("image", "inspect", "--format", "{{.Os}}", name).strip()

    def create_container(self, *, spec: ContainerSpec) -> str:
        """Create a Docker container from a spec and return its id."""
        args = [
            "create",
            "--name",
            spec.name,
            "--hostname",
            spec.hostname,
        ]

        # Expose and publish ports (host_port:container_port/protocol)
        for binding in spec.ports:
            args.extend(["--expose", binding.key])
            args.extend(["--publish", f"{binding.host_port}:{binding.key}"])

        args.append(spec.image)
        args.extend(spec.command)

        container_id = self._run(*args).strip()
        if not container_id:
            raise EngineCommandError([self.docker_bin, *args], "Engine returned no container id")
        return container_id

    def start_container(self, *, container_id: str) -> None:
        self._run("start", container_id)


__all__ = ["DockerBackend"]
