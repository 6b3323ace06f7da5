"""Pytest configuration and fixtures."""
import pytest
from fastapi.testclient import TestClient

from emgateway.core.gateway import Gateway
from emgateway.main import create_app
from emgateway.models.device import Device


@pytest.fixture
def device_params():
    """Wire object for POST /api/devices/1234."""
    return {
        "deviceId": "1234",
        "name": "Test1",
        "type": "Dishwasher",
        "measurementMethod": "Estimate",
        "interruptionsAllowed": True,
        "maxPower": 1000,
        "emSignalsAccepted": True,
        "status": "Off",
        "vendor": "Tendor",
        "serialNr": "1Serial",
        "absoluteTimestamps": False,
    }


@pytest.fixture
def gateway():
    """Empty gateway for each test."""
    return Gateway("TestGate", "1234UID", "127.0.0.1", 0, 0)


@pytest.fixture
def client(gateway):
    """FastAPI test client serving the gateway fixture."""
    return TestClient(create_app(gateway))


@pytest.fixture
def device1():
    """Simple device without the energy request attributes."""
    return Device("1234", "Test1", "Dishwasher", "Estimate",
                  True, 1000, True, "Off", "Tendor", "1Serial", False)


@pytest.fixture
def device2():
    """Device with optionalEnergy, minOnTime and minOffTime."""
    return Device("12345", "Test2", "Dishwasher", "Estimate",
                  True, 1000, True, "Off", "Tendor", "1Serial", False,
                  False, 600, 3600)
