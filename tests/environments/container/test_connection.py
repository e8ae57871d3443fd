"""Tests for EngineConnection."""

import pytest

from opcplc_harness.environments.container import (
    EngineConnection,
    EngineConnectionError,
    UnsupportedPlatformError,
    classify_platform,
    resolve_engine_endpoint,
)


def test_open_pings_engine(fake_engine, engine_factory):
    endpoint = resolve_engine_endpoint("linux")

    connection = EngineConnection.open(endpoint, engine_factory=engine_factory)

    assert connection.is_open
    assert connection.engine is fake_engine
    assert fake_engine.endpoint == endpoint
    assert fake_engine.calls == [("ping", None)]


def test_unreachable_engine_names_endpoint(fake_engine, engine_factory):
    fake_engine.fail("ping")
    endpoint = resolve_engine_endpoint("win32")

    with pytest.raises(EngineConnectionError, match="tcp://localhost:2375") as exc_info:
        EngineConnection.open(endpoint, engine_factory=engine_factory)

    assert exc_info.value.endpoint == endpoint


def test_unsupported_endpoint_never_builds_engine(fake_engine, engine_factory):
    with pytest.raises(UnsupportedPlatformError):
        EngineConnection.open(classify_platform("darwin"), engine_factory=engine_factory)

    assert fake_engine.endpoint is None
    assert fake_engine.calls == []


def test_closed_connection_rejects_engine_access(engine_factory):
    connection = EngineConnection.open(resolve_engine_endpoint("linux"), engine_factory=engine_factory)

    connection.close()
    connection.close()

    assert not connection.is_open
    with pytest.raises(EngineConnectionError, match="closed"):
        _ = connection.engine
