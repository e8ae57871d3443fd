"""OPC UA application configuration used by the publisher under test.

One value is created per test session and passed explicitly to whatever needs
it; there is no process-wide configuration object.
"""

from __future__ import annotations

import asyncio
import sys
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from opcplc_harness.core.utils import logger


class CertificateStoreType(StrEnum):
    """Where an OPC UA certificate store keeps its certificates."""

    DIRECTORY = "Directory"
    X509_STORE = "X509Store"


# Windows store used when private keys cannot be read from a directory store
OWN_CERT_X509_STORE_PATH = "CurrentUser\\UA_MachineDefault"
DEFAULT_PKI_ROOT = Path("pki")


class ApplicationConfiguration(BaseModel):
    """OPC UA application settings for the publisher test session.

    Attributes:
        application_name: OPC UA application name.
        auto_accept_certs: Trust any server certificate presented by the PLC.
        pki_root: Root directory of the directory-backed certificate stores.
        own_cert_store_type: Store type of the application's own certificate.
        own_cert_store_path: Store path of the application's own certificate.
    """

    model_config = ConfigDict(validate_assignment=True)

    application_name: str = Field(default="opcplc-harness", description="OPC UA application name")
    auto_accept_certs: bool = Field(default=True, description="Trust any server certificate")
    pki_root: Path = Field(default=DEFAULT_PKI_ROOT, description="Root of the directory certificate stores")
    own_cert_store_type: CertificateStoreType = Field(default=CertificateStoreType.DIRECTORY)
    own_cert_store_path: str = Field(default=str(DEFAULT_PKI_ROOT / "own"))
    configured: bool = Field(default=False, description="Set once configure() has completed")

    @classmethod
    def for_platform(cls, platform: str | None = None, pki_root: Path = DEFAULT_PKI_ROOT) -> ApplicationConfiguration:
        """Create a configuration with the platform-specific certificate store.

        On Windows the own certificate lives in the X509 store, otherwise in
        a directory under ``pki_root``.
        """
        platform = platform if platform is not None else sys.platform
        if platform == "win32":
            return cls(
                pki_root=pki_root,
                own_cert_store_type=CertificateStoreType.X509_STORE,
                own_cert_store_path=OWN_CERT_X509_STORE_PATH,
            )
        return cls(pki_root=pki_root, own_cert_store_path=str(pki_root / "own"))

    @property
    def trusted_store_path(self) -> Path:
        return self.pki_root / "trusted"

    @property
    def issuer_store_path(self) -> Path:
        return self.pki_root / "issuer"

    @property
    def rejected_store_path(self) -> Path:
        return self.pki_root / "rejected"

    def store_directories(self) -> list[Path]:
        """Directories that must exist for the directory-backed stores."""
        directories = [self.trusted_store_path, self.issuer_store_path, self.rejected_store_path]
        if self.own_cert_store_type == CertificateStoreType.DIRECTORY:
            directories.insert(0, Path(self.own_cert_store_path))
        return directories

    async def configure(self) -> None:
        """Create the certificate store directories and mark the configuration ready.

        Calling it again on a configured value does nothing.
        """
        if self.configured:
            return

        for directory in self.store_directories():
            await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)

        logger.info(
            f"OPC UA application '{self.application_name}' configured "
            f"(own store: {self.own_cert_store_type} {self.own_cert_store_path}, "
            f"auto-accept: {self.auto_accept_certs})"
        )
        self.configured = True


__all__ = [
    "ApplicationConfiguration",
    "CertificateStoreType",
    "OWN_CERT_X509_STORE_PATH",
]
