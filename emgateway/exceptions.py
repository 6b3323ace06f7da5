class EmGatewayError(Exception):
    """Base class for errors raised by the gateway domain model."""


class DeviceConfigurationError(EmGatewayError, ValueError):
    """Device attributes do not describe a valid appliance."""


class InvalidPlanningRequest(EmGatewayError, ValueError):
    """Planning request time window violates its ordering constraints."""
