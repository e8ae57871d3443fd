"""Tests for PLC container specification and provisioning."""

import pytest

from opcplc_harness.environments.container import (
    CreateError,
    EngineConnection,
    PlcSettings,
    StartError,
    build_container_spec,
    provision_container,
    resolve_engine_endpoint,
)
from opcplc_harness.types.container import ImageOs


@pytest.fixture
def connection(engine_factory):
    return EngineConnection.open(resolve_engine_endpoint("linux"), engine_factory=engine_factory)


def test_linux_spec(settings):
    spec = build_container_spec(settings, ImageOs.LINUX)

    assert spec.image == "mcr.microsoft.com/iotedge/opc-plc:latest"
    assert spec.name == "opcplc"
    assert spec.hostname == "opcplc"
    assert [(p.key, p.host_port) for p in spec.ports] == [("50000/tcp", 50000)]
    assert spec.command == ("--aa", "--pn", "50000")


def test_windows_spec_adds_cert_store_type(settings):
    spec = build_container_spec(settings, ImageOs.WINDOWS)

    assert spec.command == ("--aa", "--pn", "50000", "--at", "X509Store")


def test_spec_is_deterministic(settings):
    assert build_container_spec(settings, ImageOs.LINUX) == build_container_spec(settings, ImageOs.LINUX)


def test_spec_follows_port_setting():
    spec = build_container_spec(PlcSettings(port=50001), ImageOs.LINUX)

    assert spec.ports[0].container_port == spec.ports[0].host_port == 50001
    assert spec.command[-1] == "50001"


def test_provision_creates_then_starts(fake_engine, connection, settings):
    spec = build_container_spec(settings, ImageOs.LINUX)

    handle = provision_container(connection, spec)

    assert handle.name == "opcplc"
    assert handle.id
    assert fake_engine.engine_calls("create") == ["opcplc"]
    assert fake_engine.engine_calls("start") == [handle.id]
    assert fake_engine.get(handle.id).state == "running"


def test_create_failure_names_image(fake_engine, connection, settings):
    fake_engine.fail("create")

    with pytest.raises(CreateError, match="mcr.microsoft.com/iotedge/opc-plc") as exc_info:
        provision_container(connection, build_container_spec(settings, ImageOs.LINUX))

    assert exc_info.value.container_name == "opcplc"
    assert fake_engine.engine_calls("start") == []


def test_start_failure_leaves_created_container(fake_engine, connection, settings):
    fake_engine.fail("start")

    with pytest.raises(StartError) as exc_info:
        provision_container(connection, build_container_spec(settings, ImageOs.LINUX))

    leftover = fake_engine.get(exc_info.value.container_id)
    assert leftover.state == "created"
    assert leftover.name == "opcplc"
