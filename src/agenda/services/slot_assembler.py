"""Montagem da lista final de slots apresentados de um dia.

Combina grade, primeiro slot de almoco, inicio dos intervalos livres
fundidos, encaixes e inicios de agendamentos fora da grade em uma unica
sequencia ordenada e sem duplicatas.

Tudo e recalculado do zero a cada chamada, sem cache nem diff incremental.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from agenda.domain.slot import DayGrid, FitSlot, PresentedSlot, SlotKind, TimeSpan
from agenda.services.fit_slot_detector import detect_fit_slots, find_fit_slot
from agenda.services.free_interval_merger import merge_free_intervals, span_containing
from agenda.services.interval_classifier import IntervalClassifier
from agenda.services.slot_grid import generate_day_grid
from agenda.services.time_utils import to_minutes, to_text

if TYPE_CHECKING:
    import datetime as dt
    from collections.abc import Iterable, Sequence

    from agenda.domain.appointment import Appointment
    from agenda.domain.schedule import WorkSchedule

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AgendaDay:
    """Tudo o que foi derivado para uma data.

    Expoe o classificador e os encaixes para destaque interativo na
    camada de apresentacao.
    """

    day: dt.date
    grid: DayGrid
    classifier: IntervalClassifier
    merged_free_spans: tuple[TimeSpan, ...]
    fit_slots: tuple[FitSlot, ...]
    slots: tuple[PresentedSlot, ...]

    def fit_slot_at(self, slot_time: str | int) -> FitSlot | None:
        return find_fit_slot(self.fit_slots, slot_time)


def should_show_slot(
    minutes: int,
    classifier: IntervalClassifier,
    merged_free_spans: Sequence[TimeSpan],
) -> bool:
    """Esconde slots internos de intervalos livres e de agendamentos.

    - dentro de um intervalo livre fundido: inicio <= t < fim;
    - dentro de um agendamento sem ser o inicio dele: inicio < t < fim.
    """
    for span in merged_free_spans:
        if span.start <= minutes < span.end:
            return False
    for appt in classifier.bookings:
        if appt.start_minutes < minutes < appt.end_minutes:
            return False
    return True


def build_agenda_day(
    schedule: WorkSchedule | None,
    appointments: Sequence[Appointment],
    day: dt.date,
) -> AgendaDay:
    """Executa o pipeline completo para uma data."""
    grid = generate_day_grid(schedule, day)
    classifier = IntervalClassifier(appointments)
    merged = tuple(merge_free_intervals(appointments))
    fit_slots = tuple(detect_fit_slots(appointments))

    candidates = _candidate_times(grid, classifier, merged, fit_slots)
    slots = tuple(
        _classify(minutes, grid, classifier, merged, fit_slots) for minutes in candidates
    )
    logger.debug(
        "agenda_day_built",
        extra={
            "day": day.isoformat(),
            "grid_slots": len(grid.available_slots),
            "fit_slots": len(fit_slots),
            "free_spans": len(merged),
            "presented_slots": len(slots),
        },
    )
    return AgendaDay(
        day=day,
        grid=grid,
        classifier=classifier,
        merged_free_spans=merged,
        fit_slots=fit_slots,
        slots=slots,
    )


def compute_slots(
    schedule: WorkSchedule | None,
    appointments: Sequence[Appointment],
    day: dt.date,
) -> list[PresentedSlot]:
    """Lista de slots prontos para renderizacao (ordenados por horario)."""
    return list(build_agenda_day(schedule, appointments, day).slots)


def _candidate_times(
    grid: DayGrid,
    classifier: IntervalClassifier,
    merged: Sequence[TimeSpan],
    fit_slots: Sequence[FitSlot],
) -> list[int]:
    if grid.is_closed:
        return []

    ordered: list[int] = [
        minutes
        for minutes in (to_minutes(slot) for slot in grid.available_slots)
        if should_show_slot(minutes, classifier, merged)
    ]
    if grid.lunch_slots:
        ordered.append(to_minutes(grid.lunch_slots[0]))
    ordered.extend(span.start for span in merged)
    ordered.extend(fit_slot.minutes for fit_slot in fit_slots)
    ordered.extend(appt.start_minutes for appt in classifier.bookings)
    return sorted(_unique(ordered))


def _unique(values: Iterable[int]) -> list[int]:
    seen: set[int] = set()
    unique: list[int] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            unique.append(value)
    return unique


def _classify(
    minutes: int,
    grid: DayGrid,
    classifier: IntervalClassifier,
    merged: Sequence[TimeSpan],
    fit_slots: Sequence[FitSlot],
) -> PresentedSlot:
    """Prioridade: almoco > reservado > livre > encaixe > disponivel."""
    time = to_text(minutes)

    # Apenas o primeiro slot do almoco e apresentado; reservas dentro dele seguem abaixo.
    if grid.lunch_slots and time == grid.lunch_slots[0]:
        lunch_end = grid.schedule.lunch_end_time if grid.schedule is not None else None
        return PresentedSlot(time=time, kind=SlotKind.LUNCH, end_time=lunch_end)

    appointment = classifier.appointment_at(minutes)
    if appointment is not None:
        return PresentedSlot(
            time=time,
            kind=SlotKind.BOOKED,
            end_time=appointment.end_time,
            appointment=appointment,
        )

    free_interval = classifier.free_interval_at(minutes)
    if free_interval is not None:
        span = span_containing(merged, minutes)
        end_time = span.end_time if span is not None else free_interval.end_time
        # Slot no fim do intervalo e livre, mas sem faixa "10:30 - 10:30".
        if end_time == time:
            end_time = None
        return PresentedSlot(
            time=time,
            kind=SlotKind.FREE,
            end_time=end_time,
            free_interval=free_interval,
            free_span=span,
        )

    fit_slot = find_fit_slot(fit_slots, minutes)
    if fit_slot is not None:
        return PresentedSlot(
            time=time,
            kind=SlotKind.FIT,
            end_time=fit_slot.end_time,
            fit_slot=fit_slot,
        )

    return PresentedSlot(time=time, kind=SlotKind.AVAILABLE)
