"""Deteccao de encaixes: sobras curtas apos agendamentos fora da grade.

Um servico de 47 minutos iniciado na grade deixa 13 minutos ate a proxima
fronteira de 15. Sem o encaixe essa sobra nunca seria oferecida.

O filtro de duracao aqui e [10, 30] inclusivo. `time_utils.is_short_gap`
usa [15, 30) e nao substitui este filtro.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from agenda.domain.appointment import bookings_of
from agenda.domain.slot import FIT_SLOT_MAX_MINUTES, FIT_SLOT_MIN_MINUTES, FitSlot
from agenda.services.interval_classifier import slot_minutes
from agenda.services.time_utils import MINUTES_PER_DAY, next_grid_boundary, to_text

if TYPE_CHECKING:
    from collections.abc import Sequence

    from agenda.domain.appointment import Appointment

logger = logging.getLogger(__name__)


def detect_fit_slots(appointments: Sequence[Appointment]) -> list[FitSlot]:
    """Retorna encaixes validos, em ordem de inicio do agendamento de origem.

    Registros cancelados e intervalos livres sao ignorados tanto como
    origem quanto no teste de conflito.
    """
    bookings = sorted(bookings_of(appointments), key=lambda appt: appt.start_minutes)
    fit_slots: list[FitSlot] = []

    for index, appt in enumerate(bookings):
        gap_start = appt.end_minutes
        grid_end = next_grid_boundary(gap_start)
        if grid_end == gap_start:
            continue
        # Fim na meia-noite sairia como "00:00" do dia seguinte.
        if grid_end >= MINUTES_PER_DAY:
            continue

        duration = grid_end - gap_start
        if not FIT_SLOT_MIN_MINUTES <= duration <= FIT_SLOT_MAX_MINUTES:
            continue

        if _conflicts(bookings, index, gap_start, grid_end):
            logger.debug(
                "fit_slot_rejected",
                extra={"time": to_text(gap_start), "reason": "overlaps_booking"},
            )
            continue

        fit_slots.append(
            FitSlot(
                time=to_text(gap_start),
                end_time=to_text(grid_end),
                duration_minutes=duration,
            )
        )
    return fit_slots


def find_fit_slot(fit_slots: Sequence[FitSlot], slot_time: str | int) -> FitSlot | None:
    """Encaixe que comeca exatamente no horario informado."""
    minutes = slot_minutes(slot_time)
    for fit_slot in fit_slots:
        if fit_slot.minutes == minutes:
            return fit_slot
    return None


def _conflicts(
    bookings: Sequence[Appointment],
    source_index: int,
    gap_start: int,
    grid_end: int,
) -> bool:
    for index, other in enumerate(bookings):
        if index == source_index:
            continue
        if gap_start < other.end_minutes and grid_end > other.start_minutes:
            return True
    return False
