"""Test-harness integration for the OPC PLC simulator."""
