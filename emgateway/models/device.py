"""Domain models for devices and their planning requests."""
import logging
import threading
from enum import Enum
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from emgateway.exceptions import DeviceConfigurationError, InvalidPlanningRequest

logger = logging.getLogger(__name__)


class DeviceStatus(str, Enum):
    """Operating state reported for a device."""
    ON = "On"
    OFF = "Off"
    OFFLINE = "Offline"


class PlanningRequest(BaseModel):
    """A time window in which a device asks to be run.

    All values are seconds. earliest_start and latest_end are offsets from
    now; min_duration and max_duration bound the runtime inside the window.
    """
    model_config = ConfigDict(frozen=True)

    earliest_start: int
    latest_end: int
    min_duration: int
    max_duration: int

    @property
    def window(self) -> int:
        """Length of the time window in seconds."""
        return self.latest_end - self.earliest_start

    @classmethod
    def create(cls, earliest_start: int, latest_end: int,
               min_duration: int, max_duration: int) -> "PlanningRequest":
        """Build a planning request, rejecting windows that cannot be satisfied.

        Raises:
            InvalidPlanningRequest: values are not integers or the window
                ordering earliest_start < latest_end and
                0 <= min_duration <= max_duration <= window does not hold.
        """
        try:
            request = cls(
                earliest_start=earliest_start,
                latest_end=latest_end,
                min_duration=min_duration,
                max_duration=max_duration,
            )
        except ValidationError as e:
            raise InvalidPlanningRequest(f"Invalid planning request values: {e.errors()}") from e

        if request.earliest_start < 0:
            raise InvalidPlanningRequest(f"earliestStart must not be negative (got {request.earliest_start})")
        if request.earliest_start >= request.latest_end:
            raise InvalidPlanningRequest(
                f"earliestStart ({request.earliest_start}) must be before latestEnd ({request.latest_end})")
        if not 0 <= request.min_duration <= request.max_duration:
            raise InvalidPlanningRequest(
                f"minDuration ({request.min_duration}) must be between 0 and maxDuration ({request.max_duration})")
        if request.max_duration > request.window:
            raise InvalidPlanningRequest(
                f"maxDuration ({request.max_duration}) exceeds the time window ({request.window})")
        return request


class DeviceIdentification(BaseModel):
    """Identification and capability attributes every device carries."""
    model_config = ConfigDict(frozen=True)

    device_id: str
    name: str
    type: str
    measurement_method: str
    interruptions_allowed: bool
    max_power: Union[int, float]  # Watts
    em_signals_accepted: bool
    status: DeviceStatus
    vendor: str
    serial_nr: str
    absolute_timestamps: bool


class EnergyRequestCapability(BaseModel):
    """Extended attributes of devices that accept optional energy requests.

    min_on_time and min_off_time are seconds and are required when
    optional_energy is enabled.
    """
    model_config = ConfigDict(frozen=True)

    optional_energy: bool
    min_on_time: Optional[int] = None
    min_off_time: Optional[int] = None


class Device:
    """A controllable appliance registered with the gateway.

    The identification record is fixed for the lifetime of the object. To
    change a device, build a new Device and store it under the same id with
    Gateway.set_device(). Planning requests are kept in insertion order.

    Example:
        dev = Device("1234", "Dishwasher", "DishWasher", "Estimation",
                     True, 1000, True, "Off", "Vendor", "SN-1", False)
        dev.add_planning_request(0, 600, 10, 60)
    """

    def __init__(self, device_id: str, name: str, type: str, measurement_method: str,
                 interruptions_allowed: bool, max_power: Union[int, float], em_signals_accepted: bool,
                 status: str, vendor: str, serial_nr: str, absolute_timestamps: bool,
                 optional_energy: Optional[bool] = None, min_on_time: Optional[int] = None,
                 min_off_time: Optional[int] = None):
        try:
            self.identification = DeviceIdentification(
                device_id=device_id,
                name=name,
                type=type,
                measurement_method=measurement_method,
                interruptions_allowed=interruptions_allowed,
                max_power=max_power,
                em_signals_accepted=em_signals_accepted,
                status=status,
                vendor=vendor,
                serial_nr=serial_nr,
                absolute_timestamps=absolute_timestamps,
            )
            self.energy_request: Optional[EnergyRequestCapability] = None
            if optional_energy is not None:
                self.energy_request = EnergyRequestCapability(
                    optional_energy=optional_energy,
                    min_on_time=min_on_time,
                    min_off_time=min_off_time,
                )
        except ValidationError as e:
            raise DeviceConfigurationError(f"Invalid attributes for device {device_id}: {e.errors()}") from e

        if self.identification.max_power < 0:
            raise DeviceConfigurationError(f"Device {device_id}: maxPower must not be negative (got {max_power})")
        for label, value in (("minOnTime", min_on_time), ("minOffTime", min_off_time)):
            if value is not None and value < 0:
                raise DeviceConfigurationError(f"Device {device_id}: {label} must not be negative (got {value})")
        if self.energy_request is None and (min_on_time is not None or min_off_time is not None):
            raise DeviceConfigurationError(
                f"Device {device_id}: minOnTime/minOffTime require optionalEnergy to be set")
        if self.energy_request and self.energy_request.optional_energy:
            if min_on_time is None or min_off_time is None:
                raise DeviceConfigurationError(
                    f"Device {device_id}: optionalEnergy requires minOnTime and minOffTime")

        self._planning_requests: List[PlanningRequest] = []
        self._lock = threading.Lock()

    @property
    def device_id(self) -> str:
        return self.identification.device_id

    @property
    def name(self) -> str:
        return self.identification.name

    @property
    def has_energy_request(self) -> bool:
        """True when the device carries the optional energy attributes."""
        return self.energy_request is not None

    def add_planning_request(self, earliest_start: int, latest_end: int,
                             min_duration: int, max_duration: int) -> PlanningRequest:
        """Append a planning request and return it.

        Raises:
            InvalidPlanningRequest: the time window is not valid.
        """
        request = PlanningRequest.create(earliest_start, latest_end, min_duration, max_duration)
        with self._lock:
            self._planning_requests.append(request)
        logger.debug(f"Device {self.device_id}: added planning request {request}")
        return request

    def get_planning_requests(self) -> Tuple[PlanningRequest, ...]:
        """Return a snapshot of the planning requests in insertion order."""
        with self._lock:
            return tuple(self._planning_requests)

    def clear_planning_requests(self) -> None:
        with self._lock:
            self._planning_requests.clear()
        logger.debug(f"Device {self.device_id}: planning requests cleared")

    def __repr__(self):
        return f"Device(device_id={self.device_id!r}, name={self.name!r})"
