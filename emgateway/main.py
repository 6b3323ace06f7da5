"""
emGateway - Main FastAPI Application

Routing Structure:

    1. Device API (prefix: /api):
       - GET    /api/devices                        -> List all devices
       - DELETE /api/devices                        -> Remove all devices
       - GET    /api/devices/{id}                   -> Get a device
       - POST   /api/devices/{id}                   -> Create or replace a device
       - DELETE /api/devices/{id}                   -> Delete a device
       - GET    /api/devices/{id}/planningRequests  -> List planning requests
       - POST   /api/devices/{id}/planningRequests  -> Add a planning request
       - DELETE /api/devices/{id}/planningRequests  -> Clear planning requests
       - GET    /api/gateway                        -> Gateway information

    2. Health:
       - GET  /health                               -> Liveness and device count

Error Responses:
    HTTPException, request validation errors and domain errors are all
    answered with the {"status": <int>, "error": <message>} envelope.
    Request validation errors use 400 instead of FastAPI's default 422.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from emgateway.api import devices
from emgateway.api.util import rest_device_to_device
from emgateway.config import Settings, settings, SERVER_VERSION
from emgateway.core.gateway import Gateway
from emgateway.exceptions import EmGatewayError
from emgateway.models.rest import Envelope

# Configure logging based on EMG_DEBUG setting
log_level = logging.DEBUG if settings.debug else logging.INFO
logging.basicConfig(
    level=log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def error_response(status: int, message: str) -> JSONResponse:
    body = Envelope(status=status, error=message)
    return JSONResponse(status_code=status, content=body.model_dump(exclude_unset=True))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
    )
    logger.warning(f"Rejected {request.method} {request.url.path}: {errors}")
    return error_response(400, errors or "Malformed request")


async def domain_exception_handler(request: Request, exc: EmGatewayError):
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    return error_response(400, str(exc))


def build_gateway(config: Settings) -> Gateway:
    """Create the Gateway described by the settings and register preloaded devices."""
    gateway = Gateway(
        name=config.gateway_name,
        uid=config.gateway_uid,
        ip_address=config.gateway_ip,
        port=config.gateway_port,
        max_age=config.max_age,
    )
    for rest in config.devices:
        if not rest.device_id:
            logger.error(f"Skipping preloaded device without deviceId: {rest.name}")
            continue
        try:
            gateway.set_device(rest.device_id, rest_device_to_device(rest))
        except EmGatewayError as e:
            logger.error(f"Skipping preloaded device {rest.device_id}: {e}")
    return gateway


def create_app(gateway: Optional[Gateway] = None, config: Optional[Settings] = None) -> FastAPI:
    """Create the FastAPI application serving the given gateway.

    Args:
        gateway: Registry to expose. Built from the settings when omitted.
        config: Settings to use (defaults to the module-level settings).
    """
    config = config or settings
    if gateway is None:
        gateway = build_gateway(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown events."""
        logger.info(f"Starting emGateway v{SERVER_VERSION}...")
        logger.info(f"Gateway {gateway.name} ({gateway.uid}) at {gateway.ip_address}")
        logger.info(f"Serving {len(gateway)} device(s)")
        yield
        logger.info("Shutting down emGateway...")

    app = FastAPI(
        title="emGateway",
        description="Energy management gateway for controllable appliances",
        version=SERVER_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.gateway = gateway

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(EmGatewayError, domain_exception_handler)

    app.include_router(devices.router, prefix="/api", tags=["Devices"])

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": SERVER_VERSION,
            "devices": len(gateway),
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "emgateway.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=True
    )
