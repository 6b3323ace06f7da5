"""
Configuration Management for emGateway

All settings come from environment variables (or a .env file in the working
directory) and are exposed through the module-level `settings` instance.

Environment Variables:

    Server Settings:
        EMG_BIND_ADDRESS     - Server bind address (default: "0.0.0.0")
        EMG_PORT             - Server port (default: 8082)
        EMG_DEBUG            - Enable debug logging "yes"/"no" (default: "no")
        CORS_ORIGINS         - JSON list of allowed origins (default: ["*"])

    Gateway Identity:
        EMG_GATEWAY_NAME     - Gateway name (default: "EM Gateway")
        EMG_GATEWAY_UID      - Unique gateway identifier (default: "emgateway-0001")
        EMG_GATEWAY_IP       - Address advertised by the gateway (default: "127.0.0.1")
        EMG_GATEWAY_PORT     - Advertised service port (default: 0)
        EMG_MAX_AGE          - Advertisement lifetime in seconds (default: 0)

    Devices:
        EMG_DEVICES          - JSON list of devices registered at startup, using
                               the same fields as POST /api/devices/{id}

Examples:

    # Serve on port 9000 with debug logging
    EMG_PORT=9000
    EMG_DEBUG=yes

    # Preload a dishwasher
    EMG_DEVICES='[
      {"deviceId": "1234", "name": "Dishwasher", "type": "DishWasher",
       "measurementMethod": "Estimation", "interruptionsAllowed": true,
       "maxPower": 1000, "emSignalsAccepted": true, "status": "Off",
       "vendor": "Vendor", "serialNr": "SN-1", "absoluteTimestamps": false}
    ]'

Accessing Configuration:

    from emgateway.config import settings

    port = settings.server_port
    devices = settings.devices
"""
import json
import logging
from typing import List, Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from emgateway import __version__
from emgateway.models.rest import RestDevice

logger = logging.getLogger(__name__)

# Server version
SERVER_VERSION = __version__


class Settings(BaseSettings):
    """Application settings loaded from EMG_* environment variables."""

    # Server configuration
    server_host: str = Field(default="0.0.0.0", alias="EMG_BIND_ADDRESS")
    server_port: int = Field(default=8082, alias="EMG_PORT")
    debug: bool = Field(default=False, alias="EMG_DEBUG")

    # Gateway identity
    gateway_name: str = Field(default="EM Gateway", alias="EMG_GATEWAY_NAME")
    gateway_uid: str = Field(default="emgateway-0001", alias="EMG_GATEWAY_UID")
    gateway_ip: str = Field(default="127.0.0.1", alias="EMG_GATEWAY_IP")
    gateway_port: int = Field(default=0, alias="EMG_GATEWAY_PORT")
    max_age: int = Field(default=0, alias="EMG_MAX_AGE")

    # Devices registered at startup
    devices_json: Optional[str] = Field(default=None, alias="EMG_DEVICES")

    # CORS configuration
    cors_origins: List[str] = Field(default=["*"], alias="CORS_ORIGINS")

    devices: List[RestDevice] = Field(default_factory=list, exclude=True)

    model_config = {
        "env_prefix": "",
        "env_file": ".env",
        "extra": "ignore",
        "case_sensitive": False,
        "populate_by_name": True,
    }

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._initialize_devices()

    def _initialize_devices(self):
        """Parse the EMG_DEVICES JSON list into wire devices."""
        if not self.devices_json:
            return
        try:
            devices_data = json.loads(self.devices_json)
            self.devices = [RestDevice(**device) for device in devices_data]
        except (ValueError, TypeError, ValidationError) as e:
            logger.error(f"Error parsing EMG_DEVICES: {e}")
            self.devices = []


# Global settings instance
settings = Settings()
