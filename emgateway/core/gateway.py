"""
Gateway - In-memory registry of devices.

The Gateway is the single source of truth for which devices exist. It maps
device ids to Device objects and lives for the lifetime of the process.

Architecture:
    - One Gateway per process, created from Settings in main.py
    - Injected into the API through app.state (no module-level singleton),
      so tests can run against isolated gateways
    - Absence is reported with None/False, never with exceptions

Thread Safety:
    - API endpoints may run on worker threads, so the device map is guarded
      by a single RLock
    - Each Device guards its own planning requests; no call ever needs both
      locks at the same time
"""
import logging
import threading
from typing import Any, Dict, List, Optional

from emgateway.models.device import Device

logger = logging.getLogger(__name__)


class Gateway:
    """Registry of devices keyed by device id.

    Attributes:
        name: Human-readable gateway name
        uid: Unique gateway identifier
        ip_address: Address the gateway advertises
        port: Advertised service port
        max_age: Advertisement lifetime in seconds
    """

    def __init__(self, name: str, uid: str, ip_address: str, port: int = 0, max_age: int = 0):
        self.name = name
        self.uid = uid
        self.ip_address = ip_address
        self.port = port
        self.max_age = max_age
        self._devices: Dict[str, Device] = {}
        self._lock = threading.RLock()

    def set_device(self, device_id: str, device: Device) -> None:
        """Insert or replace the device stored under device_id.

        A replaced device is discarded together with its planning requests.
        """
        with self._lock:
            replaced = device_id in self._devices
            self._devices[device_id] = device
        if replaced:
            logger.debug(f"Replaced device {device_id} ({device.name})")
        else:
            logger.debug(f"Registered device {device_id} ({device.name})")

    def get_device(self, device_id: str) -> Optional[Device]:
        """Return the device for device_id or None if it is not registered."""
        with self._lock:
            return self._devices.get(device_id)

    def get_all_devices(self) -> List[Device]:
        """Return a snapshot list of all registered devices."""
        with self._lock:
            return list(self._devices.values())

    def delete_device(self, device_id: str) -> bool:
        """Remove a device. Returns False if no device was registered under device_id."""
        with self._lock:
            device = self._devices.pop(device_id, None)
        if device is None:
            return False
        logger.debug(f"Deleted device {device_id}")
        return True

    def delete_all_devices(self) -> None:
        with self._lock:
            count = len(self._devices)
            self._devices.clear()
        logger.debug(f"Deleted all devices ({count})")

    def info(self) -> Dict[str, Any]:
        """Describe the gateway itself (wire field names)."""
        return {
            "name": self.name,
            "uid": self.uid,
            "ipAddress": self.ip_address,
            "port": self.port,
            "maxAge": self.max_age,
            "devices": len(self),
        }

    def __len__(self):
        with self._lock:
            return len(self._devices)

    def __contains__(self, device_id):
        with self._lock:
            return device_id in self._devices

    def __repr__(self):
        return f"Gateway(name={self.name!r}, uid={self.uid!r}, devices={len(self)})"
