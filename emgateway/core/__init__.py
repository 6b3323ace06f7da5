"""
Core Business Logic Module

    gateway.py - Device registry
        • Purpose: Owns every registered Device, keyed by device id
        • Responsibilities:
          - Insert/replace devices (set_device)
          - Lookup with None for unknown ids (get_device)
          - Snapshot listing (get_all_devices)
          - Delete single/all devices
        • Thread Safety: one RLock around the device map

    server.py - HTTP server lifecycle
        • Purpose: start()/stop() wrapper around uvicorn for a Gateway
        • Used by the CLI and by tests that need a real listening socket

Data Flow:

    HTTP request → api.devices router → Gateway / Device operations
                                      ↓
                           api.util wire conversion
                                      ↓
                      {"status": ..., "data": ...} JSON response
"""
from .gateway import Gateway

__all__ = ["Gateway"]
