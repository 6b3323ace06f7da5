"""Conversion between domain models and their wire (REST) representation."""
from typing import Any, Dict

from emgateway.models.device import Device, PlanningRequest
from emgateway.models.rest import RestDevice, RestPlanningRequest


def device_to_rest_device(device: Device) -> Dict[str, Any]:
    """Serialize a device to its wire object.

    The identification fields are always present. optionalEnergy, minOnTime
    and minOffTime are only emitted for devices that carry the energy request
    capability, so clients can tell simple devices from schedulable ones.

    Example:
        >>> device_to_rest_device(dev)
        {"deviceId": "1234", "name": "Dishwasher", ..., "absoluteTimestamps": False}
    """
    ident = device.identification
    fields = dict(
        device_id=ident.device_id,
        name=ident.name,
        type=ident.type,
        measurement_method=ident.measurement_method,
        interruptions_allowed=ident.interruptions_allowed,
        max_power=ident.max_power,
        em_signals_accepted=ident.em_signals_accepted,
        status=ident.status,
        vendor=ident.vendor,
        serial_nr=ident.serial_nr,
        absolute_timestamps=ident.absolute_timestamps,
    )
    if device.energy_request is not None:
        fields.update(
            optional_energy=device.energy_request.optional_energy,
            min_on_time=device.energy_request.min_on_time,
            min_off_time=device.energy_request.min_off_time,
        )
    rest = RestDevice(**fields)
    return rest.model_dump(mode="json", by_alias=True, exclude_unset=True)


def rest_device_to_device(rest: RestDevice) -> Device:
    """Build a Device from its wire object.

    Raises:
        DeviceConfigurationError: the attributes do not describe a valid device.
    """
    return Device(
        rest.device_id,
        rest.name,
        rest.type,
        rest.measurement_method,
        rest.interruptions_allowed,
        rest.max_power,
        rest.em_signals_accepted,
        rest.status,
        rest.vendor,
        rest.serial_nr,
        rest.absolute_timestamps,
        optional_energy=rest.optional_energy,
        min_on_time=rest.min_on_time,
        min_off_time=rest.min_off_time,
    )


def planning_request_to_rest(request: PlanningRequest) -> Dict[str, Any]:
    rest = RestPlanningRequest(
        earliest_start=request.earliest_start,
        latest_end=request.latest_end,
        min_duration=request.min_duration,
        max_duration=request.max_duration,
    )
    return rest.model_dump(by_alias=True)
