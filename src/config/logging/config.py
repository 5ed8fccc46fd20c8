"""Configuração centralizada de logging do agenda-encaixe.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="agenda_encaixe")
    logger = get_logger(__name__)
    logger.info("agenda_day_built", extra={"presented_slots": 24})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter, create_text_formatter

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "agenda_encaixe"

# httpx/httpcore logam cada request em INFO; o backend HTTP já loga falhas.
QUIET_LOGGERS: dict[str, str] = {"httpx": "WARNING", "httpcore": "WARNING"}


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    *,
    json_output: bool = True,
    logger_levels: Mapping[str, str] | None = None,
) -> None:
    """Instala um único handler no root logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (case insensitive).
        service_name: Valor do campo `service` em todo record.
        correlation_id_getter: Fonte do correlation_id (ex: ContextVar).
        json_output: False usa o formatter de texto.
        logger_levels: Níveis por logger; padrão QUIET_LOGGERS.

    Raises:
        ValueError: nível de log inválido.
    """
    root_level = _check_level(level)

    root = logging.getLogger()
    root.setLevel(root_level)
    root.handlers = [
        _build_handler(root_level, service_name, correlation_id_getter, json_output)
    ]

    for name, logger_level in (logger_levels or QUIET_LOGGERS).items():
        logging.getLogger(name).setLevel(_check_level(logger_level))


def get_logger(name: str) -> logging.Logger:
    """Logger do módulo (geralmente `__name__`)."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Registra que a resposta de contingência foi entregue.

    Na agenda o fallback é a lista vazia + mensagem de erro no lugar dos
    slots calculados. Nunca incluir dados de cliente.
    """
    extra: dict[str, object] = {"fallback_used": True, "component": component}
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms
    logger.info("Fallback applied for %s", component, extra=extra)


def _check_level(level: str) -> str:
    normalized = level.upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return normalized


def _build_handler(
    level: str,
    service_name: str,
    correlation_id_getter: Callable[[], str] | None,
    json_output: bool,
) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(create_json_formatter() if json_output else create_text_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    return handler
