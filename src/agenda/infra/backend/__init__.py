"""Backend de agenda: cliente HTTP e normalizacao de payload."""

from agenda.infra.backend.http_agenda_backend import HttpAgendaBackend
from agenda.infra.backend.payload_normalizer import (
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
