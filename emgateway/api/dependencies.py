"""
FastAPI dependencies for the API routers.
"""
from fastapi import Request

from emgateway.core.gateway import Gateway


def get_gateway(request: Request) -> Gateway:
    """Return the Gateway the application was created with."""
    return request.app.state.gateway
