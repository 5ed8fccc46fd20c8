"""Observabilidade da agenda: correlation_id para logs estruturados.

Uso:
    from agenda.observability import get_correlation_id, set_correlation_id
"""

from agenda.observability.correlation import (
    CORRELATION_HEADER,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "CORRELATION_HEADER",
    "generate_correlation_id",
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
