"""Modelos de dominio da agenda (expediente, agendamentos, slots)."""

from agenda.domain.appointment import (
    Appointment,
    AppointmentStatus,
    FreeInterval,
    FreeIntervalRequest,
    bookings_of,
    free_intervals_of,
)
from agenda.domain.schedule import WEEKDAY_NAMES, ScheduleResponse, WorkSchedule
from agenda.domain.slot import (
    FIT_SLOT_MAX_MINUTES,
    FIT_SLOT_MIN_MINUTES,
    DayGrid,
    FitSlot,
    PresentedSlot,
    SlotKind,
    TimeSpan,
)

__all__ = [
    "FIT_SLOT_MAX_MINUTES",
    "FIT_SLOT_MIN_MINUTES",
    "WEEKDAY_NAMES",
    "Appointment",
    "AppointmentStatus",
    "DayGrid",
    "FitSlot",
    "FreeInterval",
    "FreeIntervalRequest",
    "PresentedSlot",
    "ScheduleResponse",
    "SlotKind",
    "TimeSpan",
    "WorkSchedule",
    "bookings_of",
    "free_intervals_of",
]
