"""Fixed parameters of the OPC PLC simulator container.

These values must match what OPC publisher tests expect to find on the host,
so they are reproduced exactly. Settings may override them per run.
"""

from __future__ import annotations

# Container engine endpoints per host platform
WINDOWS_ENGINE_URL = "tcp://localhost:2375"
LINUX_ENGINE_URL = "unix:///var/run/docker.sock"

# Simulator image
PLC_IMAGE = "mcr.microsoft.com/iotedge/opc-plc"
PLC_IMAGE_TAG = "latest"

# Container identity and network exposure
PLC_CONTAINER_NAME = "opcplc"
PLC_HOSTNAME = "opcplc"
PLC_PORT = 50000

# opc-plc command-line flags
AUTO_ACCEPT_CERTS_FLAG = "--aa"
PORT_FLAG = "--pn"
CERT_STORE_TYPE_FLAG = "--at"
# Windows images cannot access private keys in a directory store
WINDOWS_CERT_STORE_TYPE = "X509Store"

# Number of most recently created containers inspected when reaping
REAP_LIST_LIMIT = 10


__all__ = [
    "AUTO_ACCEPT_CERTS_FLAG",
    "CERT_STORE_TYPE_FLAG",
    "LINUX_ENGINE_URL",
    "PLC_CONTAINER_NAME",
    "PLC_HOSTNAME",
    "PLC_IMAGE",
    "PLC_IMAGE_TAG",
    "PLC_PORT",
    "PORT_FLAG",
    "REAP_LIST_LIMIT",
    "WINDOWS_CERT_STORE_TYPE",
    "WINDOWS_ENGINE_URL",
]
