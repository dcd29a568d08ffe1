# Este archivo registra el endpoint comodín: cualquier método y cualquier ruta.
# Devuelve la petición como eco o el cuerpo/estado pedido por query params.

"""
Catch-all echo route.

Any method, any path not claimed by a fixture route. Query params:
    ?delay=2000     wait before responding (ms)
    ?status=500     HTTP status of the response
    ?body={"ok":1}  response body (JSON, or wrapped as {"message": ...})
"""
from typing import Any, Awaitable, Callable, Dict, Iterable, Optional, Tuple  # Type hints

from fastapi import FastAPI, Request  # Framework HTTP
from fastapi.responses import JSONResponse, Response  # Respuestas JSON y vacías

from ..config.settings import Settings  # Configuración (delay por defecto)
from ..models.envelope import EchoEnvelope, loads_strict, resolve_response_body  # Sobre de eco y override
from ..utils.logging import RequestLogSink, get_logger  # Sink de log y logger estructurado
from ..utils.query import pause, query_mapping, resolve_directives  # Directivas de query

logger = get_logger(__name__)

# 1xx, 204 and 304 responses carry no body
BODYLESS_STATUSES = (204, 304)


def status_allows_body(status: int) -> bool:
    """Whether a response with this status may carry a body."""
    return not (status < 200 or status in BODYLESS_STATUSES)


def header_mapping(items: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    """Header pairs as a mapping; repeated headers are joined with ", "."""
    result: Dict[str, str] = {}
    for key, value in items:
        result[key] = f"{result[key]}, {value}" if key in result else value
    return result


def raw_url(request: Request) -> str:
    """Path and query string exactly as the client sent them."""
    raw_path = request.scope.get("raw_path")
    path = raw_path.split(b"?", 1)[0].decode("latin-1") if raw_path else request.url.path
    query = request.scope.get("query_string", b"").decode("latin-1")
    return f"{path}?{query}" if query else path


def parse_request_payload(raw: bytes, content_type: Optional[str]) -> Any:
    """
    Decode a request body for the echo envelope.

    Empty bodies become None. JSON content types are parsed when they are
    valid JSON; everything else is echoed as text.
    """
    if not raw:
        return None

    text = raw.decode("utf-8", errors="replace")
    if content_type and "json" in content_type.lower():
        try:
            return loads_strict(text)
        except ValueError:
            logger.debug("request_body_not_json", content_type=content_type)

    return text


def register_echo_routes(
    app: FastAPI,
    settings: Settings,
    sink: RequestLogSink,
    sleep: Callable[[int], Awaitable[None]] = pause
) -> None:
    """
    Register the catch-all route.

    Must run after every specific route: matching is first-registered-first.

    Args:
        app: FastAPI application
        settings: Provides the default delay
        sink: Receives one log line per request
        sleep: Awaitable delay in milliseconds
    """

    async def echo(request: Request) -> Response:
        """Echo the request back, or answer with the body and status asked for."""
        directives = resolve_directives(
            request.query_params,
            default_delay_ms=settings.echo_delay_ms
        )

        if directives.delay_ms > 0:
            await sleep(directives.delay_ms)

        payload = parse_request_payload(
            await request.body(),
            request.headers.get("content-type")
        )
        url = raw_url(request)

        def build_envelope() -> EchoEnvelope:
            return EchoEnvelope(
                method=request.method,
                url=url,
                headers=header_mapping(request.headers.items()),
                body=payload,
                query=query_mapping(request.query_params.multi_items()),
                delay=directives.delay_ms,
            )

        response_body = resolve_response_body(directives.body, build_envelope)

        sink(request.method, url, directives.delay_ms, directives.status)
        if not status_allows_body(directives.status):
            return Response(status_code=directives.status)
        return JSONResponse(response_body.content, status_code=directives.status)

    # methods=None: the route answers every method, including TRACE or PURGE
    app.add_route("/{path:path}", echo, methods=None)
