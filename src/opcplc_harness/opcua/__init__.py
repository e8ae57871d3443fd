"""OPC UA protocol-stack configuration for the publisher under test."""

from .config import ApplicationConfiguration, CertificateStoreType

__all__ = [
    "ApplicationConfiguration",
    "CertificateStoreType",
]
