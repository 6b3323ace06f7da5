"""Tests for the device registry."""
import threading

from emgateway.models.device import Device


def make_device(device_id, name="Device"):
    return Device(device_id, name, "WashingMachine", "Estimation",
                  False, 2000, True, "On", "Vendor", "SN-" + device_id, True)


def test_get_device(gateway, device1):
    """Test getting a device by ID."""
    gateway.set_device("1234", device1)
    assert gateway.get_device("1234") is device1
    assert "1234" in gateway


def test_get_nonexistent_device(gateway):
    """Test getting a device that doesn't exist."""
    assert gateway.get_device("nonexistent") is None
    assert "nonexistent" not in gateway


def test_get_all_devices_empty(gateway):
    assert gateway.get_all_devices() == []


def test_get_all_devices_is_snapshot(gateway, device1, device2):
    """Test the returned list is not the registry itself."""
    gateway.set_device(device1.device_id, device1)
    devices = gateway.get_all_devices()
    gateway.set_device(device2.device_id, device2)
    assert devices == [device1]
    assert len(gateway.get_all_devices()) == 2


def test_set_device_replaces(gateway, device1):
    """Test a second set_device under the same id overwrites the first."""
    gateway.set_device("1234", device1)
    device1.add_planning_request(0, 600, 10, 60)
    replacement = make_device("1234", name="Replacement")
    gateway.set_device("1234", replacement)
    assert len(gateway) == 1
    assert gateway.get_device("1234") is replacement
    assert gateway.get_device("1234").get_planning_requests() == ()


def test_delete_device(gateway, device1):
    """Test delete_device reports whether a device was removed."""
    gateway.set_device("1234", device1)
    assert gateway.delete_device("1234") is True
    assert gateway.delete_device("1234") is False
    assert gateway.get_device("1234") is None


def test_delete_all_devices(gateway, device1, device2):
    gateway.set_device(device1.device_id, device1)
    gateway.set_device(device2.device_id, device2)
    gateway.delete_all_devices()
    assert gateway.get_all_devices() == []
    assert len(gateway) == 0


def test_info(gateway, device1):
    """Test the gateway description."""
    gateway.set_device("1234", device1)
    assert gateway.info() == {
        "name": "TestGate",
        "uid": "1234UID",
        "ipAddress": "127.0.0.1",
        "port": 0,
        "maxAge": 0,
        "devices": 1,
    }


def test_concurrent_set_and_delete(gateway):
    """Test concurrent registrations from several threads."""
    def register(start):
        for i in range(start, start + 50):
            gateway.set_device(str(i), make_device(str(i)))

    threads = [threading.Thread(target=register, args=(n * 50,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(gateway) == 200

    threads = [threading.Thread(target=gateway.delete_device, args=(str(i),)) for i in range(0, 200, 2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(gateway) == 100
