"""Implementacoes concretas de IO do motor de agenda."""

from agenda.infra.backend import (
    HttpAgendaBackend,
    normalize_appointment,
    normalize_appointments,
    normalize_schedule,
    normalize_schedule_response,
)

__all__ = [
    "HttpAgendaBackend",
    "normalize_appointment",
    "normalize_appointments",
    "normalize_schedule",
    "normalize_schedule_response",
]
