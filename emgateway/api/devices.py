"""
Device Management API

REST API for registering devices and managing their planning requests.
All routes are prefixed with /api (configured in main.py).

Routes:
    - GET    /api/devices                          -> List all devices
    - DELETE /api/devices                          -> Remove all devices
    - GET    /api/devices/{id}                     -> Get a device
    - POST   /api/devices/{id}                     -> Create or replace a device
    - DELETE /api/devices/{id}                     -> Delete a device
    - GET    /api/devices/{id}/planningRequests    -> List planning requests
    - POST   /api/devices/{id}/planningRequests    -> Add a planning request
    - DELETE /api/devices/{id}/planningRequests    -> Clear planning requests
    - GET    /api/gateway                          -> Gateway information

Response Format:
    Every response is {"status": <int>, "data": <payload>}. "data" is left out
    when there is nothing to return; errors carry an "error" message instead.

Design Notes:
    - Unknown device ids raise HTTPException(404); main.py turns it into the
      envelope
    - POST bodies are validated by pydantic; failures are answered with 400
    - The path id is authoritative: a body without deviceId takes the path
      id, a body with a different deviceId is rejected
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from emgateway.api.dependencies import get_gateway
from emgateway.api.util import device_to_rest_device, planning_request_to_rest, rest_device_to_device
from emgateway.core.gateway import Gateway
from emgateway.models.device import Device
from emgateway.models.rest import DeviceBody, Envelope, PlanningRequestBody

logger = logging.getLogger(__name__)

router = APIRouter()


def envelope(status: int = 200, data: Any = None) -> JSONResponse:
    """Wrap a payload in the {status, data} response envelope."""
    body = Envelope(status=status) if data is None else Envelope(status=status, data=data)
    return JSONResponse(status_code=status, content=body.model_dump(exclude_unset=True))


def _require_device(gateway: Gateway, device_id: str) -> Device:
    device = gateway.get_device(device_id)
    if device is None:
        raise HTTPException(status_code=404, detail=f"Device {device_id} not found")
    return device


@router.get("/devices")
async def list_devices(gateway: Gateway = Depends(get_gateway)):
    """List all registered devices."""
    return envelope(data=[device_to_rest_device(device) for device in gateway.get_all_devices()])


@router.delete("/devices")
async def delete_all_devices(gateway: Gateway = Depends(get_gateway)):
    """Remove every registered device."""
    gateway.delete_all_devices()
    logger.info("All devices deleted")
    return envelope()


@router.get("/devices/{device_id}")
async def get_device(device_id: str, gateway: Gateway = Depends(get_gateway)):
    """Get a single device by id."""
    device = _require_device(gateway, device_id)
    return envelope(data=device_to_rest_device(device))


@router.post("/devices/{device_id}")
async def set_device(device_id: str, body: DeviceBody, gateway: Gateway = Depends(get_gateway)):
    """Create the device, or fully replace it if the id is already registered.

    Replacing discards the previous device including its planning requests.

    Raises:
        HTTPException 400: body deviceId differs from the path id, or the
            attributes do not describe a valid device
    """
    rest = body.device
    if rest.device_id is None:
        rest.device_id = device_id
    elif rest.device_id != device_id:
        raise HTTPException(
            status_code=400,
            detail=f"deviceId '{rest.device_id}' in body does not match path id '{device_id}'"
        )

    device = rest_device_to_device(rest)
    replaced = device_id in gateway
    gateway.set_device(device_id, device)
    logger.info(f"{'Replaced' if replaced else 'Registered'} device {device_id} ({device.name})")
    return envelope()


@router.delete("/devices/{device_id}")
async def delete_device(device_id: str, gateway: Gateway = Depends(get_gateway)):
    """Delete a device."""
    if not gateway.delete_device(device_id):
        raise HTTPException(status_code=404, detail=f"Device {device_id} not found")
    logger.info(f"Deleted device {device_id}")
    return envelope()


@router.get("/devices/{device_id}/planningRequests")
async def get_planning_requests(device_id: str, gateway: Gateway = Depends(get_gateway)):
    """List the planning requests of a device in insertion order."""
    device = _require_device(gateway, device_id)
    return envelope(data=[planning_request_to_rest(r) for r in device.get_planning_requests()])


@router.post("/devices/{device_id}/planningRequests")
async def add_planning_request(device_id: str, body: PlanningRequestBody,
                               gateway: Gateway = Depends(get_gateway)):
    """Append a planning request to a device.

    Raises:
        HTTPException 404: device not registered
        HTTPException 400: time window is invalid (handled in main.py)
    """
    device = _require_device(gateway, device_id)
    req = body.planning_request
    request = device.add_planning_request(req.earliest_start, req.latest_end, req.min_duration, req.max_duration)
    return envelope(data=planning_request_to_rest(request))


@router.delete("/devices/{device_id}/planningRequests")
async def clear_planning_requests(device_id: str, gateway: Gateway = Depends(get_gateway)):
    """Remove all planning requests of a device."""
    device = _require_device(gateway, device_id)
    device.clear_planning_requests()
    return envelope()


@router.get("/gateway")
async def get_gateway_info(gateway: Gateway = Depends(get_gateway)):
    """Describe the gateway and how many devices it holds."""
    return envelope(data=gateway.info())
