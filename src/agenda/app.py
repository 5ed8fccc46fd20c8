"""Entrypoint HTTP do agenda-encaixe.

Expõe a agenda calculada (slots, encaixes, intervalos livres) como
aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn agenda.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn agenda.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from agenda.bootstrap import create_agenda_backend, initialize_app, validate_runtime_settings
from agenda.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from api.routes import create_api_router
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from fastapi import Response

    from agenda.protocols import AgendaBackendProtocol

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Cria o backend compartilhado no startup e fecha no shutdown.

    Um backend injetado antes do startup (testes) é mantido e não é fechado.
    """
    logger.info("app_starting")
    validate_runtime_settings()

    injected: AgendaBackendProtocol | None = getattr(app.state, "agenda_backend", None)
    if injected is None:
        app.state.agenda_backend = create_agenda_backend()

    yield

    logger.info("app_shutting_down")
    backend = app.state.agenda_backend
    if injected is None:
        close_async = getattr(backend, "aclose", None)
        if callable(close_async):
            await close_async()
        app.state.agenda_backend = None


async def correlation_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Propaga x-correlation-id para os logs e devolve no response."""
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)


def create_app(backend: AgendaBackendProtocol | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        backend: Backend de agenda já construído (ex: fake em testes).
            Se None, o lifespan cria o cliente HTTP a partir das settings.
    """
    fastapi_app = FastAPI(
        title="agenda-encaixe",
        description="Disponibilidade de agenda com encaixes e intervalos livres",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    fastapi_app.state.agenda_backend = backend

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(correlation_id_middleware)

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")

    return fastapi_app


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    initialize_app()
    logger.info("agenda_dev_server_starting")
    uvicorn.run(
        "agenda.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


def _create_default_app() -> FastAPI:
    initialize_app()
    return create_app()


# Aplicação ASGI exposta para uvicorn
app = _create_default_app()


if __name__ == "__main__":
    main()
