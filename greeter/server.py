"""Process lifecycle: bind the listener, then hand it to uvicorn."""

import socket
import sys

import uvicorn

from greeter.core.config import Settings, get_settings
from greeter.core.logging import configure_logging, get_logger
from greeter.main import create_application

logger = get_logger(__name__)


def bind_socket(host: str, port: int) -> socket.socket:
    """Open a listening TCP socket; raises OSError when the address is taken."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(socket.SOMAXCONN)
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def serve(settings: Settings | None = None) -> int:
    """Run the greeting service until shutdown and return the process exit code.

    The listener is bound before uvicorn starts; a taken port is logged and
    yields exit code 1.
    """

    if settings is None:
        settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    try:
        sock = bind_socket(settings.HOST, settings.PORT)
    except OSError as exc:
        logger.error("Failed to bind %s:%s: %s", settings.HOST, settings.PORT, exc)
        return 1

    try:
        config = uvicorn.Config(
            create_application(settings),
            host=settings.HOST,
            port=settings.PORT,
            log_level=settings.LOG_LEVEL,
        )
        server = uvicorn.Server(config)
        logger.info("Listening on %s:%s", settings.HOST, settings.PORT)
        server.run(sockets=[sock])
    finally:
        sock.close()
    return 0


def main() -> None:
    """Console entry point for `greeting-service` and `python -m greeter`."""
    sys.exit(serve())
