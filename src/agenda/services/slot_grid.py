"""Geracao da grade de 15 minutos de um dia de trabalho."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from agenda.domain.slot import DayGrid
from agenda.services.time_utils import GRID_STEP_MINUTES, to_minutes, to_text
from utils.errors import ScheduleMissingError

if TYPE_CHECKING:
    import datetime as dt
    from collections.abc import Sequence

    from agenda.domain.schedule import WorkSchedule

logger = logging.getLogger(__name__)

# Janela padrao da grade multi-profissional (08:00-18:00).
DEFAULT_WINDOW_START = 8 * 60
DEFAULT_WINDOW_END = 18 * 60


def resolve_schedule(schedules: Sequence[WorkSchedule], day: dt.date) -> WorkSchedule | None:
    """Escolhe a escala da data: data especifica vence o dia da semana."""
    for schedule in schedules:
        if schedule.date is not None and schedule.date == day:
            return schedule
    for schedule in schedules:
        if schedule.date is None and schedule.applies_to(day):
            return schedule
    return None


def generate_day_grid(schedule: WorkSchedule | None, day: dt.date) -> DayGrid:
    """Gera slots de 15 minutos do expediente, separando os de almoco.

    O ultimo periodo parcial e descartado: nenhum slot ultrapassa o fim
    do expediente.
    """
    try:
        working = _require_working_schedule(schedule, day)
    except ScheduleMissingError as exc:
        logger.debug(
            "agenda_day_closed",
            extra={"day": day.isoformat(), "reason": exc.reason},
        )
        return DayGrid(schedule=schedule, closed_reason=exc.reason)

    lunch_start, lunch_end = working.lunch_minutes if working.has_lunch else (None, None)

    available: list[str] = []
    lunch: list[str] = []
    cursor = working.start_minutes
    while cursor + GRID_STEP_MINUTES <= working.end_minutes:
        is_lunch = (
            lunch_start is not None
            and lunch_end is not None
            and lunch_start <= cursor < lunch_end
        )
        (lunch if is_lunch else available).append(to_text(cursor))
        cursor += GRID_STEP_MINUTES

    return DayGrid(
        available_slots=tuple(available),
        lunch_slots=tuple(lunch),
        schedule=working,
    )


def grid_window(
    schedules_by_professional: Sequence[Sequence[WorkSchedule]],
    day: dt.date,
) -> tuple[int, int]:
    """Janela (inicio, fim) em minutos da grade com varios profissionais.

    Usa o inicio mais cedo e o fim mais tarde entre os expedientes do dia,
    com fim minimo as 18:00, arredondados para a grade. Sem expediente
    valido, retorna a janela padrao 08:00-18:00.
    """
    starts: list[int] = []
    ends: list[int] = []
    for schedules in schedules_by_professional:
        schedule = resolve_schedule(schedules, day)
        if schedule is None or schedule.is_day_off or not schedule.has_working_hours:
            continue
        starts.append(schedule.start_minutes)
        ends.append(schedule.end_minutes)

    if not starts or max(ends) <= min(starts):
        return DEFAULT_WINDOW_START, DEFAULT_WINDOW_END

    earliest = min(starts)
    latest = max(max(ends), DEFAULT_WINDOW_END)
    earliest = (earliest // GRID_STEP_MINUTES) * GRID_STEP_MINUTES
    latest = -(-latest // GRID_STEP_MINUTES) * GRID_STEP_MINUTES
    return earliest, latest


def window_slots(start_minutes: int, end_minutes: int) -> list[str]:
    """Rotulos de 15 em 15 minutos em [inicio, fim)."""
    return [to_text(m) for m in range(start_minutes, end_minutes, GRID_STEP_MINUTES)]


def is_within_working_hours(schedule: WorkSchedule | None, day: dt.date, slot_time: str) -> bool:
    """Indica se o horario cai dentro do expediente do profissional na data."""
    if schedule is None or schedule.is_day_off or not schedule.has_working_hours:
        return False
    if not schedule.applies_to(day):
        return False
    minutes = to_minutes(slot_time)
    return schedule.start_minutes <= minutes < schedule.end_minutes


def _require_working_schedule(schedule: WorkSchedule | None, day: dt.date) -> WorkSchedule:
    if schedule is None:
        raise ScheduleMissingError("no_schedule")
    if not schedule.applies_to(day):
        raise ScheduleMissingError("schedule_not_for_day")
    if schedule.is_day_off:
        raise ScheduleMissingError("day_off")
    if not schedule.has_working_hours:
        raise ScheduleMissingError("missing_hours")
    return schedule
