"""
Data Models for emGateway

Domain Models (models/device.py):

    Device
        └── A controllable appliance
            - identification: DeviceIdentification (always present)
            - energy_request: EnergyRequestCapability (optional)
            - ordered PlanningRequest list (guarded by a per-device lock)

    PlanningRequest
        └── Immutable time window with duration bounds (seconds)

Wire Models (models/rest.py):

    RestDevice, RestPlanningRequest
        └── camelCase JSON shapes exchanged with HTTP clients

    DeviceBody, PlanningRequestBody
        └── POST request bodies ({"device": {...}}, {"planningRequest": {...}})

    Envelope
        └── {"status": <int>, "data": <payload>} wrapper for every response

Domain and wire models are kept apart; emgateway.api.util converts between
them. Extending the wire schema means adding the field to RestDevice and to
the conversion functions in util.
"""
from .device import Device, DeviceIdentification, DeviceStatus, EnergyRequestCapability, PlanningRequest
from .rest import DeviceBody, Envelope, PlanningRequestBody, RestDevice, RestPlanningRequest

__all__ = [
    "Device", "DeviceIdentification", "DeviceStatus", "EnergyRequestCapability", "PlanningRequest",
    "DeviceBody", "Envelope", "PlanningRequestBody", "RestDevice", "RestPlanningRequest",
]
