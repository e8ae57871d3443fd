"""Core modules for the OPC PLC harness."""

from .utils.logging import setup_opcplc_logging

__all__ = [
    "setup_opcplc_logging",
]
