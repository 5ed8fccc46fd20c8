"""correlation_id por requisição da agenda.

Cada chamada HTTP recebe um ID (do header `x-correlation-id` ou gerado)
que é injetado em todos os logs via CorrelationIdFilter. ContextVar
mantém o valor isolado entre requisições concorrentes.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

CORRELATION_HEADER = "x-correlation-id"

_correlation_id: ContextVar[str] = ContextVar("agenda_correlation_id", default="")


def get_correlation_id() -> str:
    """correlation_id corrente ou string vazia fora de requisição."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o ID no contexto; gera UUID v4 se vazio.

    Returns:
        Token para restaurar via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())
