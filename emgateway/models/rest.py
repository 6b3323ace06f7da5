"""Wire (REST) schemas.

These are the JSON shapes exchanged with HTTP clients. Field names are
camelCase on the wire and snake_case in Python.

RestDevice
    Required: deviceId, name, type, measurementMethod, interruptionsAllowed,
              maxPower, emSignalsAccepted, status, vendor, serialNr,
              absoluteTimestamps
    Optional: optionalEnergy, minOnTime, minOffTime (only emitted for devices
              that carry the energy request capability)

RestPlanningRequest
    earliestStart, latestEnd, minDuration, maxDuration (seconds)
"""
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel

from emgateway.models.device import DeviceStatus


class RestModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RestDevice(RestModel):
    """Wire representation of a device.

    Booleans and numbers are strict: "1000" or "yes" are rejected, not converted.
    """
    device_id: Optional[str] = None  # Filled from the URL path when omitted in POST bodies
    name: str
    type: str
    measurement_method: str
    interruptions_allowed: StrictBool
    max_power: Union[StrictInt, StrictFloat]  # Watts
    em_signals_accepted: StrictBool
    status: DeviceStatus
    vendor: str
    serial_nr: str
    absolute_timestamps: StrictBool
    optional_energy: Optional[StrictBool] = None
    min_on_time: Optional[StrictInt] = None
    min_off_time: Optional[StrictInt] = None


class RestPlanningRequest(RestModel):
    """Wire representation of a planning request."""
    earliest_start: StrictInt
    latest_end: StrictInt
    min_duration: StrictInt
    max_duration: StrictInt


class DeviceBody(RestModel):
    """Body of POST /devices/{id}."""
    device: RestDevice


class PlanningRequestBody(RestModel):
    """Body of POST /devices/{id}/planningRequests."""
    planning_request: RestPlanningRequest


class Envelope(BaseModel):
    """Uniform response body.

    Successful responses carry {"status", "data"}; errors carry {"status", "error"}.
    Dump with exclude_unset=True so absent members are left out.
    """
    status: int
    data: Optional[Any] = None
    error: Optional[str] = None
