"""
ApiServer - start()/stop() lifecycle for serving a Gateway over HTTP.

Runs uvicorn in a background thread so the caller keeps control of the
process (CLI, tests, embedding applications).

Usage:
    gateway = Gateway("Home", "uid-1", "127.0.0.1")
    server = ApiServer(8082, gateway)
    server.start()      # returns once the socket is listening
    ...
    server.stop()       # drains connections and joins the thread
"""
import logging
import threading
import time
from typing import Optional

import uvicorn

from emgateway.core.gateway import Gateway

logger = logging.getLogger(__name__)


class ApiServer:
    """Serve the REST API for a gateway on host:port."""

    def __init__(self, port: int, gateway: Gateway, host: str = "127.0.0.1", start_timeout: float = 10.0):
        self.port = port
        self.host = host
        self.gateway = gateway
        self.start_timeout = start_timeout
        self._server: Optional[uvicorn.Server] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}/api"

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Bind the listening socket and start accepting requests.

        Raises:
            RuntimeError: the server is already running or did not come up
                within start_timeout seconds.
        """
        if self.running:
            raise RuntimeError(f"Server already running on {self.host}:{self.port}")

        # Imported here: emgateway.main configures logging on import
        from emgateway.main import create_app

        config = uvicorn.Config(
            create_app(self.gateway),
            host=self.host,
            port=self.port,
            log_level="warning",
        )
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(target=self._server.run, name=f"emgateway-{self.port}", daemon=True)
        self._thread.start()

        deadline = time.monotonic() + self.start_timeout
        while not self._server.started:
            if not self._thread.is_alive() or time.monotonic() > deadline:
                self.stop()
                raise RuntimeError(f"Server failed to start on {self.host}:{self.port}")
            time.sleep(0.05)
        logger.info(f"API listening on {self.url}")

    def stop(self) -> None:
        """Stop accepting requests, drain open connections and release the socket.

        Raises:
            RuntimeError: the server thread did not finish within start_timeout
                seconds. The server stays registered so stop() can be retried.
        """
        if self._server is None:
            return
        self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout=self.start_timeout)
            if self._thread.is_alive():
                logger.error(f"API on {self.host}:{self.port} did not stop within {self.start_timeout}s")
                raise RuntimeError(f"Server on {self.host}:{self.port} is still running")
        self._server = None
        self._thread = None
        logger.info(f"API on {self.host}:{self.port} stopped")
