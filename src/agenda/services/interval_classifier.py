"""Consultas pontuais de pertinencia de um horario nos registros do dia.

Reservas usam intervalo semiaberto [inicio, fim); intervalos livres usam
intervalo fechado [inicio, fim]: o slot final de uma pausa ainda e
exibido como parte dela. A assimetria altera a contagem de slots visiveis.

Em reservas sobrepostas vale o primeiro registro na ordem de entrada.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from agenda.domain.appointment import bookings_of, free_intervals_of
from agenda.services.time_utils import normalize_time_text, to_minutes

if TYPE_CHECKING:
    from collections.abc import Sequence

    from agenda.domain.appointment import Appointment


def slot_minutes(slot_time: str | int) -> int:
    """Aceita minutos ou texto ("HH:MM", "HH:MM:SS" ou timestamp com "T")."""
    if isinstance(slot_time, int):
        return slot_time
    return to_minutes(normalize_time_text(slot_time))


class IntervalClassifier:
    """Classifica horarios contra as reservas e intervalos livres de um dia.

    Cada consulta e O(agendamentos); o volume de um dia e pequeno.
    """

    __slots__ = ("_bookings", "_free_intervals")

    def __init__(self, appointments: Sequence[Appointment]) -> None:
        self._bookings = tuple(bookings_of(appointments))
        self._free_intervals = tuple(free_intervals_of(appointments))

    @property
    def bookings(self) -> tuple[Appointment, ...]:
        return self._bookings

    @property
    def free_intervals(self) -> tuple[Appointment, ...]:
        return self._free_intervals

    def is_booked(self, slot_time: str | int) -> bool:
        return self.appointment_at(slot_time) is not None

    def appointment_at(self, slot_time: str | int) -> Appointment | None:
        minutes = slot_minutes(slot_time)
        for appt in self._bookings:
            if appt.start_minutes <= minutes < appt.end_minutes:
                return appt
        return None

    def is_free_interval_member(self, slot_time: str | int) -> bool:
        return self.free_interval_at(slot_time) is not None

    def free_interval_at(self, slot_time: str | int) -> Appointment | None:
        minutes = slot_minutes(slot_time)
        for appt in self._free_intervals:
            if appt.start_minutes <= minutes <= appt.end_minutes:
                return appt
        return None

    def is_booking_start(self, slot_time: str | int) -> bool:
        minutes = slot_minutes(slot_time)
        return any(appt.start_minutes == minutes for appt in self._bookings)

    def is_free_interval_start(self, slot_time: str | int) -> bool:
        minutes = slot_minutes(slot_time)
        return any(appt.start_minutes == minutes for appt in self._free_intervals)
