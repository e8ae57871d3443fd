"""Pytest fixtures for tests that need the OPC PLC simulator.

Load the plugin from a conftest.py:

    pytest_plugins = ["opcplc_harness.testing.plugin"]

Tests marked ``docker`` need a reachable container engine and only run when
``--run-docker`` is passed.
"""

from __future__ import annotations

import asyncio
from collections.abc import Generator
from pathlib import Path

import pytest

from opcplc_harness.core.utils import ensure_temp_data_dir, setup_opcplc_logging
from opcplc_harness.environments.container import PlcServer, PlcSettings
from opcplc_harness.opcua import ApplicationConfiguration
from opcplc_harness.types.container import ContainerHandle


def pytest_addoption(parser):
    """Add CLI options for PLC tests."""
    parser.addoption(
        "--run-docker",
        action="store_true",
        default=False,
        help="Run tests marked 'docker' against the local container engine",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "docker: marks tests that require a container engine")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-docker"):
        return
    skip_docker = pytest.mark.skip(reason="needs --run-docker")
    for item in items:
        if "docker" in item.keywords:
            item.add_marker(skip_docker)


@pytest.fixture(scope="session")
def plc_settings() -> PlcSettings:
    """PLC settings for the test session (environment-backed defaults)."""
    settings = PlcSettings()
    setup_opcplc_logging(settings.log_level)
    return settings


@pytest.fixture(scope="session")
def temp_data_dir(plc_settings: PlcSettings) -> Path:
    """Temp-data directory under the working directory, created if absent."""
    return ensure_temp_data_dir(name=plc_settings.temp_data_dir)


@pytest.fixture(scope="session")
def opc_application_config(plc_settings: PlcSettings, temp_data_dir: Path) -> ApplicationConfiguration:
    """OPC UA application configuration, configured once per session."""
    config = ApplicationConfiguration.for_platform(pki_root=temp_data_dir / "pki")
    asyncio.run(config.configure())
    return config


@pytest.fixture(scope="session")
def plc_server(plc_settings: PlcSettings) -> Generator[ContainerHandle]:
    """Run the PLC simulator container for the whole session.

    Yields:
        Handle of the running PLC container.

    Cleanup:
    - Reaps every recent container of the PLC image, even if the session failed
    """
    with PlcServer(settings=plc_settings) as handle:
        yield handle
