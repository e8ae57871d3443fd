"""Managed environments the OPC publisher tests depend on."""

from .container import PlcServer

__all__ = ["PlcServer"]
