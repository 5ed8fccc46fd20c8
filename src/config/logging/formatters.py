"""Formatters de logging estruturado.

Logs JSON com campos obrigatórios (correlation_id, service, timestamp,
level, logger, message). Em desenvolvimento local pode-se usar o
formatter de texto, com os mesmos campos.

Nunca registrar dados de cliente (nome, telefone) nos logs da agenda.
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(service)s:%(correlation_id)s] %(name)s: %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "INFO",
            "logger": "agenda.services.agenda_loader",
            "message": "agenda_stale_result_discarded",
            "correlation_id": "abc-123",
            "service": "agenda_encaixe",
            "day": "2026-10-20"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )


def create_text_formatter() -> logging.Formatter:
    """Formatter legível para desenvolvimento (sem campos extras)."""
    return logging.Formatter(TEXT_FORMAT)
