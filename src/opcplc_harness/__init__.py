"""opcplc-harness - OPC PLC simulator container fixture for OPC publisher tests"""

from opcplc_harness.core.utils import logger
from opcplc_harness.environments.container import PlcServer, PlcSettings

__version__ = "0.1.0"

__all__ = ["PlcServer", "PlcSettings", "logger"]
