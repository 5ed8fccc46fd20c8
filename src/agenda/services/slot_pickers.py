"""Opcoes de hora/minuto para o formulario de intervalo livre."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from agenda.domain.slot import DayGrid
    from agenda.services.interval_classifier import IntervalClassifier


def available_hours(grid: DayGrid, classifier: IntervalClassifier) -> list[str]:
    """Horas ("HH") com pelo menos um slot da grade livre para reserva."""
    hours = {slot.split(":")[0] for slot in _open_slots(grid, classifier)}
    return sorted(hours)


def available_minutes(grid: DayGrid, classifier: IntervalClassifier, hour: str) -> list[str]:
    """Minutos ("MM") livres dentro da hora informada."""
    minutes = {
        minute
        for slot_hour, minute in (slot.split(":") for slot in _open_slots(grid, classifier))
        if slot_hour == hour.zfill(2)
    }
    return sorted(minutes)


def _open_slots(grid: DayGrid, classifier: IntervalClassifier) -> list[str]:
    return [
        slot
        for slot in grid.available_slots
        if not classifier.is_booked(slot) and not classifier.is_free_interval_member(slot)
    ]
