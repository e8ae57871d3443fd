"""Pytest configuration for all tests."""

from __future__ import annotations

import itertools
from dataclasses import dataclass

import pytest

from opcplc_harness.core.utils import setup_opcplc_logging
from opcplc_harness.environments.container import EngineCommandError, PlcSettings
from opcplc_harness.types.container import ContainerSpec, ContainerSummary, EngineEndpoint

pytest_plugins = ["pytester", "opcplc_harness.testing.plugin"]


@dataclass
class FakeContainer:
    id: str
    image: str
    name: str
    state: str = "running"
    spec: ContainerSpec | None = None


class FakeEngine:
    """In-memory container engine implementing the ContainerEngine protocol.

    Records every call in ``calls`` as ``(operation, argument)`` tuples.
    """

    def __init__(self) -> None:
        self.containers: list[FakeContainer] = []  # oldest first
        self.calls: list[tuple[str, str | None]] = []
        self.image_os = "linux"
        self.endpoint: EngineEndpoint | None = None
        self._failures: dict[str, set[str] | None] = {}
        self._ids = itertools.count(1)

    # -- test setup -------------------------------------------------------

    def add_container(self, image: str, name: str | None = None, state: str = "running") -> str:
        container_id = f"{next(self._ids):064x}"
        name = name or f"c{container_id[-4:]}"
        self.containers.append(FakeContainer(id=container_id, image=image, name=name, state=state))
        return container_id

    def fail(self, operation: str, container_id: str | None = None) -> None:
        """Make ``operation`` fail, for every container or only for ``container_id``."""
        if container_id is None:
            self._failures[operation] = None
        else:
            self._failures.setdefault(operation, set()).add(container_id)

    def get(self, container_id: str) -> FakeContainer:
        return next(c for c in self.containers if c.id == container_id)

    def images(self) -> list[str]:
        return [c.image for c in self.containers]

    def running(self) -> list[FakeContainer]:
        return [c for c in self.containers if c.state == "running"]

    def engine_calls(self, operation: str) -> list[str | None]:
        return [arg for op, arg in self.calls if op == operation]

    def _record(self, operation: str, arg: str | None = None) -> None:
        self.calls.append((operation, arg))
        if operation in self._failures:
            ids = self._failures[operation]
            if ids is None or arg in ids:
                raise EngineCommandError(["docker", operation, arg or ""], f"simulated {operation} failure")

    # -- ContainerEngine protocol -------------------------------------------

    def ping(self) -> None:
        self._record("ping")

    def list_containers(self, *, limit: int) -> list[ContainerSummary]:
        self._record("list", str(limit))
        newest_first = list(reversed(self.containers))[:limit]
        return [ContainerSummary(id=c.id, image=c.image, names=(c.name,), state=c.state) for c in newest_first]

    def stop_container(self, *, container_id: str) -> None:
        self._record("stop", container_id)
        self.get(container_id).state = "exited"

    def remove_container(self, *, container_id: str) -> None:
        self._record("remove", container_id)
        container = self.get(container_id)
        if container.state == "running":
            raise EngineCommandError(["docker", "rm", container_id], "cannot remove a running container")
        self.containers.remove(container)

    def pull_image(self, *, name: str, tag: str) -> None:
        self._record("pull", f"{name}:{tag}")

    def inspect_image_os(self, *, name: str) -> str:
        self._record("inspect", name)
        return self.image_os

    def create_container(self, *, spec: ContainerSpec) -> str:
        self._record("create", spec.name)
        if any(c.name == spec.name for c in self.containers):
            raise EngineCommandError(["docker", "create"], f"container name '{spec.name}' is already in use")
        container_id = self.add_container(spec.image, name=spec.name, state="created")
        self.get(container_id).spec = spec
        return container_id

    def start_container(self, *, container_id: str) -> None:
        self._record("start", container_id)
        container = self.get(container_id)
        host_ports = {p.host_port for p in container.spec.ports} if container.spec else set()
        for other in self.running():
            if other.spec and host_ports & {p.host_port for p in other.spec.ports}:
                raise EngineCommandError(["docker", "start", container_id], "port is already allocated")
        container.state = "running"


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def engine_factory(fake_engine: FakeEngine):
    """Engine factory handing out ``fake_engine`` for any endpoint."""

    def _factory(endpoint: EngineEndpoint) -> FakeEngine:
        fake_engine.endpoint = endpoint
        return fake_engine

    return _factory


@pytest.fixture
def settings() -> PlcSettings:
    return PlcSettings()


@pytest.fixture(autouse=True)
def _rebind_logging():
    """Point the package log handler back at the session stream after tests that capture stdout."""
    yield
    setup_opcplc_logging(force=True)
