# Este archivo registra los endpoints con datos fijos: /contact y /contacts,
# que simulan una API real lenta con una espera por defecto.

"""
Fixed-fixture routes.

Implements GET /contact and GET /contacts (HEAD is served by the same handlers).
"""
from typing import Awaitable, Callable  # Type hints para funciones inyectadas

from fastapi import FastAPI, Request  # Framework HTTP
from fastapi.responses import JSONResponse  # Respuesta JSON compacta

from ..config.settings import Settings  # Configuración (delays por defecto)
from ..models.contact import sample_contact, sample_contacts  # Fixtures de contactos
from ..utils.logging import RequestLogSink  # Tipo del sink de log por petición
from ..utils.query import pause, parse_int_param  # Parseo de ?delay= y espera


def register_fixture_routes(
    app: FastAPI,
    settings: Settings,
    sink: RequestLogSink,
    sleep: Callable[[int], Awaitable[None]] = pause
) -> None:
    """
    Register fixed-content routes.

    Must run before the catch-all registration so these paths win.

    Args:
        app: FastAPI application
        settings: Provides the per-endpoint default delays
        sink: Receives one log line per request
        sleep: Awaitable delay in milliseconds
    """

    @app.api_route("/contact", methods=["GET", "HEAD"])
    async def get_contact(request: Request) -> JSONResponse:
        """
        Return one contact after a delay.

        Query params:
            delay: milliseconds to wait (default: 2000)
        """
        delay_ms = parse_int_param(request.query_params.get("delay"), settings.contact_delay_ms)
        await sleep(delay_ms)

        contact = sample_contact()

        sink(request.method, "/contact", delay_ms, 200)
        return JSONResponse(contact.to_json(), status_code=200)

    @app.api_route("/contacts", methods=["GET", "HEAD"])
    async def get_contacts(request: Request) -> JSONResponse:
        """
        Return three contacts after a delay.

        Query params:
            delay: milliseconds to wait (default: 1000)
        """
        delay_ms = parse_int_param(request.query_params.get("delay"), settings.contacts_delay_ms)
        await sleep(delay_ms)

        contacts = [contact.to_json() for contact in sample_contacts()]

        sink(request.method, "/contacts", delay_ms, 200)
        return JSONResponse(contacts, status_code=200)
