"""Valores derivados pelo motor de disponibilidade.

Nada aqui e persistido: tudo e recalculado a cada mudanca de entrada.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from agenda.services.time_utils import to_minutes, to_text

if TYPE_CHECKING:
    from agenda.domain.appointment import Appointment
    from agenda.domain.schedule import WorkSchedule

FIT_SLOT_MIN_MINUTES = 10
FIT_SLOT_MAX_MINUTES = 30


class SlotKind(StrEnum):
    """Classificacao de um slot apresentado."""

    AVAILABLE = "available"
    BOOKED = "booked"
    FREE = "free"
    LUNCH = "lunch"
    FIT = "fit"


@dataclass(frozen=True, slots=True)
class TimeSpan:
    """Intervalo [start, end] em minutos desde a meia-noite."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"start ({self.start}) deve ser <= end ({self.end})")

    @property
    def start_time(self) -> str:
        return to_text(self.start)

    @property
    def end_time(self) -> str:
        return to_text(self.end)

    def contains(self, minutes: int) -> bool:
        return self.start <= minutes <= self.end


@dataclass(frozen=True, slots=True)
class FitSlot:
    """Encaixe: slot curto oferecido na sobra apos um agendamento irregular.

    Attributes:
        time: Inicio do encaixe (fim do agendamento que gerou a sobra).
        end_time: Proxima fronteira da grade.
        duration_minutes: Duracao do encaixe, sempre entre 10 e 30.
        opportunistic: Marca o slot como sintetico (nao vem da grade).
    """

    time: str
    end_time: str
    duration_minutes: int
    opportunistic: bool = True

    def __post_init__(self) -> None:
        if not FIT_SLOT_MIN_MINUTES <= self.duration_minutes <= FIT_SLOT_MAX_MINUTES:
            raise ValueError(
                "duration_minutes deve estar entre "
                f"{FIT_SLOT_MIN_MINUTES} e {FIT_SLOT_MAX_MINUTES}, "
                f"recebido: {self.duration_minutes}"
            )

    @property
    def minutes(self) -> int:
        return to_minutes(self.time)

    def as_dict(self) -> dict[str, Any]:
        return {
            "time": self.time,
            "end_time": self.end_time,
            "duration_minutes": self.duration_minutes,
            "opportunistic": self.opportunistic,
        }


@dataclass(frozen=True, slots=True)
class DayGrid:
    """Grade de 15 minutos de um dia, particionada em expediente e almoco."""

    available_slots: tuple[str, ...] = ()
    lunch_slots: tuple[str, ...] = ()
    schedule: WorkSchedule | None = None
    closed_reason: str | None = None

    @property
    def is_closed(self) -> bool:
        return not self.available_slots and not self.lunch_slots


@dataclass(frozen=True, slots=True)
class PresentedSlot:
    """Unidade final de renderizacao da agenda."""

    time: str
    kind: SlotKind
    end_time: str | None = None
    appointment: Appointment | None = None
    free_interval: Appointment | None = None
    free_span: TimeSpan | None = None
    fit_slot: FitSlot | None = None
    minutes: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "minutes", to_minutes(self.time))

    @property
    def label(self) -> str:
        if self.end_time and self.kind in (SlotKind.LUNCH, SlotKind.FREE, SlotKind.FIT):
            return f"{self.time} - {self.end_time}"
        return self.time

    @property
    def is_bookable(self) -> bool:
        return self.kind in (SlotKind.AVAILABLE, SlotKind.FIT)

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "time": self.time,
            "label": self.label,
            "kind": self.kind.value,
            "end_time": self.end_time,
            "bookable": self.is_bookable,
        }
        if self.appointment is not None:
            payload["appointment"] = {
                "id": self.appointment.id,
                "status": self.appointment.status.value,
                "start_time": self.appointment.start_time,
                "end_time": self.appointment.end_time,
                "client_name": self.appointment.client_name,
                "service_names": list(self.appointment.service_names),
            }
        if self.free_interval is not None:
            payload["free_interval"] = {
                "id": self.free_interval.id,
                "notes": self.free_interval.notes,
            }
        if self.free_span is not None:
            payload["free_span"] = {
                "start_time": self.free_span.start_time,
                "end_time": self.free_span.end_time,
            }
        if self.fit_slot is not None:
            payload["fit_slot"] = self.fit_slot.as_dict()
        return payload


__all__ = [
    "FIT_SLOT_MAX_MINUTES",
    "FIT_SLOT_MIN_MINUTES",
    "DayGrid",
    "FitSlot",
    "PresentedSlot",
    "SlotKind",
    "TimeSpan",
]
