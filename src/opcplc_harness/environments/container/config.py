"""Settings for the PLC simulator container.

Defaults reproduce the fixed parameters from ``defaults``. Environment variables
with the OPCPLC_ prefix override them for a single run.

Example environment variables:
    OPCPLC_PORT=50001
    OPCPLC_REAP_CONTINUE_ON_ERROR=true
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from opcplc_harness.types.container import ImageReference

from .defaults import PLC_CONTAINER_NAME, PLC_HOSTNAME, PLC_IMAGE, PLC_IMAGE_TAG, PLC_PORT, REAP_LIST_LIMIT


class PlcSettings(BaseSettings):
    """Settings for provisioning the OPC PLC simulator."""

    model_config = SettingsConfigDict(env_prefix="OPCPLC_", frozen=True)

    image: str = PLC_IMAGE
    """Simulator image name, matched exactly against engine listings when reaping."""

    tag: str = PLC_IMAGE_TAG
    """Tag pulled before every run."""

    container_name: str = PLC_CONTAINER_NAME
    """Name given to the created container."""

    hostname: str = PLC_HOSTNAME
    """Hostname inside the created container."""

    port: int = Field(default=PLC_PORT, gt=0, lt=65536)
    """OPC UA port, published on the identical host port."""

    reap_limit: int = Field(default=REAP_LIST_LIMIT, gt=0)
    """Number of most recently created containers inspected when reaping."""

    reap_continue_on_error: bool = False
    """Keep reaping past individual stop/remove failures and report them together."""

    temp_data_dir: str = "tempdata"
    """Directory created under the working directory for test data."""

    log_level: str = "INFO"
    """Log level used when the harness sets up logging itself."""

    @property
    def image_ref(self) -> ImageReference:
        return ImageReference(name=self.image, tag=self.tag)


@lru_cache
def get_settings() -> PlcSettings:
    """Get PLC settings (cached)."""
    return PlcSettings()


__all__ = [
    "PlcSettings",
    "get_settings",
]
