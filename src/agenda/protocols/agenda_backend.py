"""Contrato do backend de agenda consumido pelo motor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import datetime as dt

    from agenda.domain.appointment import Appointment, FreeIntervalRequest
    from agenda.domain.schedule import ScheduleResponse


@runtime_checkable
class AgendaBackendProtocol(Protocol):
    """Operacoes de leitura de escala/agendamentos e criacao de intervalo livre."""

    async def get_schedule(self, professional_id: str) -> ScheduleResponse:
        """Retorna as escalas do profissional (uma por dia da semana)."""
        ...

    async def get_appointments(self, professional_id: str, day: dt.date) -> list[Appointment]:
        """Retorna reservas e intervalos livres do profissional na data."""
        ...

    async def create_free_interval(self, request: FreeIntervalRequest) -> Appointment | None:
        """Declara intervalo livre; retorna o registro criado quando o backend o devolve."""
        ...
