"""Carga da agenda de um dia com descarte de respostas obsoletas.

A busca no backend e a unica borda assincrona. Quando o usuario troca de
data antes da resposta anterior chegar, vale apenas a ultima requisicao:
resultados de geracoes antigas sao descartados ao completar.

Tambem monta a grade da equipe (varios profissionais na mesma data).
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from agenda.services.slot_assembler import build_agenda_day
from agenda.services.slot_grid import (
    grid_window,
    is_within_working_hours,
    resolve_schedule,
    window_slots,
)
from agenda.services.slot_pickers import available_hours, available_minutes
from config.logging import log_fallback
from utils.errors import BackendUnavailableError

if TYPE_CHECKING:
    import datetime as dt
    from collections.abc import Sequence

    from agenda.domain.appointment import Appointment, FreeIntervalRequest
    from agenda.domain.schedule import ScheduleResponse
    from agenda.domain.slot import PresentedSlot
    from agenda.protocols.agenda_backend import AgendaBackendProtocol
    from agenda.services.slot_assembler import AgendaDay

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Erro ao buscar horários"
COMPUTE_ERROR_MESSAGE = "Erro ao montar horários da agenda"


@dataclass(frozen=True, slots=True)
class AgendaSnapshot:
    """Resultado de uma carga: agenda calculada ou erro (nunca parcial)."""

    professional_id: str
    day: dt.date
    agenda: AgendaDay | None = None
    error: str | None = None

    @property
    def slots(self) -> tuple[PresentedSlot, ...]:
        if self.agenda is None:
            return ()
        return self.agenda.slots

    def available_hours(self) -> list[str]:
        if self.agenda is None:
            return []
        return available_hours(self.agenda.grid, self.agenda.classifier)

    def available_minutes(self, hour: str) -> list[str]:
        if self.agenda is None:
            return []
        return available_minutes(self.agenda.grid, self.agenda.classifier, hour)

    def as_dict(self) -> dict[str, Any]:
        closed_reason = self.agenda.grid.closed_reason if self.agenda is not None else None
        return {
            "professional_id": self.professional_id,
            "date": self.day.isoformat(),
            "slots": [slot.as_dict() for slot in self.slots],
            "closed_reason": closed_reason,
            "error": self.error,
        }


def build_snapshot(
    professional_id: str,
    day: dt.date,
    schedule_response: ScheduleResponse,
    appointments: list[Appointment],
) -> AgendaSnapshot:
    """Calcula a agenda a partir de dados ja normalizados.

    Qualquer falha interna vira lista vazia com mensagem de erro.
    """
    try:
        schedule = resolve_schedule(schedule_response.schedules, day)
        agenda = build_agenda_day(schedule, appointments, day)
    except Exception as exc:
        logger.exception(
            "agenda_compute_failed",
            extra={"day": day.isoformat(), "error_type": type(exc).__name__},
        )
        log_fallback(logger, "agenda_loader", reason="compute_failed")
        return AgendaSnapshot(
            professional_id=professional_id,
            day=day,
            error=COMPUTE_ERROR_MESSAGE,
        )
    return AgendaSnapshot(professional_id=professional_id, day=day, agenda=agenda)


class AgendaLoader:
    """Busca escala e agendamentos e recalcula a agenda do dia selecionado.

    Cada `load()` recebe um numero de geracao. Ao completar, o resultado so
    e aceito se nenhuma carga mais nova foi iniciada; caso contrario
    retorna None e o snapshot corrente nao e alterado.
    """

    __slots__ = ("_backend", "_current", "_generation", "_professional_id", "_selected_day")

    def __init__(self, backend: AgendaBackendProtocol, professional_id: str) -> None:
        self._backend = backend
        self._professional_id = professional_id
        self._generation = 0
        self._selected_day: dt.date | None = None
        self._current: AgendaSnapshot | None = None

    @property
    def selected_day(self) -> dt.date | None:
        return self._selected_day

    @property
    def current(self) -> AgendaSnapshot | None:
        return self._current

    async def load(self, day: dt.date) -> AgendaSnapshot | None:
        """Carrega a data; retorna None se a resposta ficou obsoleta."""
        self._generation += 1
        generation = self._generation
        self._selected_day = day

        snapshot = await self._fetch(day)

        if generation != self._generation:
            logger.info(
                "agenda_stale_result_discarded",
                extra={
                    "day": day.isoformat(),
                    "selected_day": self._selected_day.isoformat() if self._selected_day else None,
                },
            )
            return None
        self._current = snapshot
        return snapshot

    async def create_free_interval(self, request: FreeIntervalRequest) -> AgendaSnapshot | None:
        """Declara intervalo livre e recarrega a data selecionada.

        Raises:
            BackendUnavailableError: falha ao criar o intervalo no backend.
        """
        await self._backend.create_free_interval(request)
        logger.info(
            "agenda_free_interval_created",
            extra={"day": request.appointment_date.isoformat()},
        )
        return await self.load(self._selected_day or request.appointment_date)

    async def _fetch(self, day: dt.date) -> AgendaSnapshot:
        try:
            schedule_response, appointments = await asyncio.gather(
                self._backend.get_schedule(self._professional_id),
                self._backend.get_appointments(self._professional_id, day),
            )
        except BackendUnavailableError as exc:
            logger.warning(
                "agenda_fetch_failed",
                extra={"day": day.isoformat(), "error": str(exc)},
            )
            log_fallback(logger, "agenda_loader", reason="backend_unavailable")
            return AgendaSnapshot(
                professional_id=self._professional_id,
                day=day,
                error=FETCH_ERROR_MESSAGE,
            )
        except Exception as exc:
            logger.exception(
                "agenda_fetch_unexpected_error",
                extra={"day": day.isoformat(), "error_type": type(exc).__name__},
            )
            log_fallback(logger, "agenda_loader", reason="unexpected_error")
            return AgendaSnapshot(
                professional_id=self._professional_id,
                day=day,
                error=FETCH_ERROR_MESSAGE,
            )
        return build_snapshot(self._professional_id, day, schedule_response, appointments)


@dataclass(frozen=True, slots=True)
class TeamGrid:
    """Grade de varios profissionais: quais horarios caem no expediente de cada um."""

    day: dt.date
    slots: tuple[str, ...]
    working_slots: dict[str, tuple[str, ...]]
    errors: dict[str, str]

    def is_working(self, professional_id: str, slot_time: str) -> bool:
        return slot_time in self.working_slots.get(professional_id, ())

    def as_dict(self) -> dict[str, Any]:
        return {
            "date": self.day.isoformat(),
            "slots": list(self.slots),
            "professionals": [
                {
                    "professional_id": professional_id,
                    "working_slots": list(self.working_slots.get(professional_id, ())),
                    "error": self.errors.get(professional_id),
                }
                for professional_id in (*self.working_slots, *self.errors)
            ],
        }


async def load_team_grid(
    backend: AgendaBackendProtocol,
    professional_ids: Sequence[str],
    day: dt.date,
) -> TeamGrid:
    """Monta a grade multi-profissional da data.

    As escalas sao buscadas em paralelo. A janela vai do inicio mais cedo
    ao fim mais tarde (minimo 18:00). Profissional cuja escala falhou fica
    fora da janela e aparece em `errors` com a mensagem de busca.
    """
    responses = await asyncio.gather(
        *(backend.get_schedule(professional_id) for professional_id in professional_ids),
        return_exceptions=True,
    )

    loaded: dict[str, ScheduleResponse] = {}
    errors: dict[str, str] = {}
    for professional_id, response in zip(professional_ids, responses):
        if isinstance(response, BackendUnavailableError):
            logger.warning(
                "team_grid_schedule_fetch_failed",
                extra={"professional_id": professional_id, "error": str(response)},
            )
            errors[professional_id] = FETCH_ERROR_MESSAGE
        elif isinstance(response, Exception):
            logger.error(
                "team_grid_schedule_unexpected_error",
                extra={"professional_id": professional_id, "error_type": type(response).__name__},
                exc_info=response,
            )
            errors[professional_id] = FETCH_ERROR_MESSAGE
        elif isinstance(response, BaseException):
            raise response
        else:
            loaded[professional_id] = response
    if errors:
        log_fallback(logger, "team_grid", reason="partial_schedules")

    start, end = grid_window([response.schedules for response in loaded.values()], day)
    slots = tuple(window_slots(start, end))
    working_slots: dict[str, tuple[str, ...]] = {}
    for professional_id, response in loaded.items():
        schedule = resolve_schedule(response.schedules, day)
        working_slots[professional_id] = tuple(
            slot for slot in slots if is_within_working_hours(schedule, day, slot)
        )

    logger.debug(
        "team_grid_built",
        extra={
            "day": day.isoformat(),
            "professionals": len(professional_ids),
            "failed": len(errors),
            "slots": len(slots),
        },
    )
    return TeamGrid(day=day, slots=slots, working_slots=working_slots, errors=errors)
