# Este es el servidor principal: inicializa configuración y logging, registra
# las rutas (fijas primero, comodín al final) y ejecuta uvicorn.

"""
Mock HTTP Server.

Main entry point: builds the FastAPI app, binds the listening socket and
serves until interrupted.
"""
import socket  # Socket de escucha, enlazado antes de arrancar uvicorn
import sys  # Código de salida
from typing import Awaitable, Callable, Optional  # Type hints

import uvicorn  # Servidor ASGI
from fastapi import FastAPI  # Framework HTTP
from pydantic import ValidationError as PydanticValidationError  # Errores de configuración

from .config.settings import Settings, get_settings  # Singleton de configuración
from .exceptions import BindError, ConfigurationError  # Excepciones personalizadas
from .routes.echo_routes import register_echo_routes  # Ruta comodín
from .routes.fixture_routes import register_fixture_routes  # Rutas /contact y /contacts
from .utils.logging import RequestLogSink, get_logger, setup_logging, structlog_request_sink
from .utils.query import pause  # Espera por defecto

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    sink: Optional[RequestLogSink] = None,
    sleep: Callable[[int], Awaitable[None]] = pause
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use (default: process-wide settings)
        sink: Request log sink (default: structlog ``request_served`` events)
        sleep: Awaitable delay in milliseconds

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    sink = sink or structlog_request_sink()

    # No docs routes: /docs and /openapi.json belong to the catch-all
    app = FastAPI(
        title=settings.server_name,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    register_fixture_routes(app, settings, sink, sleep)
    register_echo_routes(app, settings, sink, sleep)

    return app


def bind_socket(host: str, port: int) -> socket.socket:
    """
    Bind the listening socket.

    Args:
        host: Interface to bind (0.0.0.0 for all)
        port: TCP port

    Returns:
        Bound socket, not yet listening

    Raises:
        BindError: If the address cannot be bound
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)

    try:
        sock.bind((host, port))
    except OSError as e:
        sock.close()
        raise BindError(
            f"Could not bind {host}:{port}: {e}",
            context={"host": host, "port": port, "errno": e.errno}
        ) from e

    sock.set_inheritable(True)
    return sock


def render_banner(settings: Settings) -> str:
    """Human-readable startup banner listing endpoints and query directives."""
    base = f"http://{settings.display_host}:{settings.port}"
    lines = [
        "",
        f"  Mock HTTP Server running on {base}",
        "",
        "  Endpoints:",
        f"    GET  {base}/contact            one contact (object)",
        f"    GET  {base}/contacts           three contacts (array)",
        f"    GET  {base}/contact?delay=5000 with a custom delay",
        "",
        "  Generic:",
        "    Any method, any path: echoes the request back",
        "    ?delay=2000      response delay (ms)",
        "    ?status=500      response status",
        '    ?body={"ok":1}   response body (JSON, or wrapped as {"message": ...})',
        "",
    ]
    return "\n".join(lines)


def load_settings() -> Settings:
    """
    Load settings, turning validation failures into ConfigurationError.

    Raises:
        ConfigurationError: If any MOCK_HTTP_* value is invalid
    """
    try:
        return get_settings()
    except PydanticValidationError as e:
        raise ConfigurationError(
            "Invalid configuration",
            context={"errors": [err["msg"] for err in e.errors()]}
        ) from e


def main():
    """
    Main entry point for running the mock server.

    Can be invoked via:
    - python -m mock_http
    - the mock-http-server console script
    """
    try:
        settings = load_settings()
    except ConfigurationError as e:
        setup_logging()
        logger.error("invalid_configuration", error=str(e), **e.context)
        sys.exit(1)

    setup_logging(
        level=settings.log_level,
        json_logs=settings.log_json,
        log_dir=settings.log_dir
    )

    app = create_app(settings)

    try:
        sock = bind_socket(settings.host, settings.port)
    except BindError as e:
        logger.error("bind_failed", error=str(e), **e.context)
        sys.exit(1)

    print(render_banner(settings), flush=True)

    logger.info(
        "mock_server_starting",
        server_name=settings.server_name,
        host=settings.host,
        port=settings.port
    )

    # log_config=None keeps uvicorn on the handlers set up above
    config = uvicorn.Config(app, log_config=None, access_log=False)
    server = uvicorn.Server(config)

    try:
        server.run(sockets=[sock])
    except KeyboardInterrupt:
        logger.info("mock_server_shutdown", reason="keyboard_interrupt")
    finally:
        sock.close()


if __name__ == "__main__":
    main()
