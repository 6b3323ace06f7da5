"""
API Routers Module

    devices.py - Device registry and planning request API
        • Prefix: /api
        • Routes: /devices, /devices/{id}, /devices/{id}/planningRequests, /gateway
        • Design: {status, data} envelope, 404 for unknown ids, 400 for bad bodies

    util.py - Domain <-> wire conversion
        • device_to_rest_device, rest_device_to_device, planning_request_to_rest

    dependencies.py - FastAPI dependencies
        • get_gateway: Gateway injected through app.state

Adding New Routers:

    1. Create a module in emgateway/api/ defining `router = APIRouter()`
    2. Import it here and add it to __all__
    3. Register it in main.create_app() with its prefix
"""
from . import devices

__all__ = ["devices"]
