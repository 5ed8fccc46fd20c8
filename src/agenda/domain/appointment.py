"""Modelos de dominio para agendamentos e intervalos livres.

Horarios chegam aqui ja normalizados para "HH:MM".
"""

from __future__ import annotations

import datetime as dt
from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from agenda.services.time_utils import normalize_time_text, to_minutes

if TYPE_CHECKING:
    from collections.abc import Sequence


class AppointmentStatus(StrEnum):
    """Status de um registro de agenda."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELED = "canceled"
    FREE = "free"


class Appointment(BaseModel):
    """Intervalo reservado na agenda do profissional.

    Registros com status `free` sao intervalos livres declarados pelo
    profissional e nunca contam como reserva.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(default="", description="Identificador do agendamento no backend.")
    start_time: str = Field(..., description="Inicio (HH:MM), nao necessariamente na grade.")
    end_time: str = Field(..., description="Fim (HH:MM).")
    status: AppointmentStatus = Field(
        default=AppointmentStatus.PENDING,
        description="Status atual do registro.",
    )
    appointment_date: dt.date | None = Field(default=None, description="Data do agendamento.")
    notes: str = Field(default="", description="Observacoes livres.")
    client_name: str | None = Field(default=None, description="Nome do cliente, quando houver.")
    service_names: tuple[str, ...] = Field(default=(), description="Servicos reservados.")

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _normalize_time(cls, value: object) -> str:
        return normalize_time_text(value)

    @model_validator(mode="after")
    def _check_order(self) -> Appointment:
        if self.start_minutes >= self.end_minutes:
            raise ValueError("start_time deve ser anterior a end_time")
        return self

    @property
    def start_minutes(self) -> int:
        return to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return to_minutes(self.end_time)

    @property
    def is_free_interval(self) -> bool:
        return self.status is AppointmentStatus.FREE

    @property
    def is_booking(self) -> bool:
        """Reserva efetiva: nem cancelada nem intervalo livre."""
        return self.status not in (AppointmentStatus.CANCELED, AppointmentStatus.FREE)


class FreeIntervalRequest(BaseModel):
    """Dados para declarar um intervalo livre na agenda do profissional."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    professional_id: str = Field(..., min_length=1, description="Profissional dono da agenda.")
    appointment_date: dt.date = Field(..., description="Data do intervalo.")
    start_time: str = Field(..., description="Inicio do intervalo (HH:MM).")
    end_time: str = Field(..., description="Fim do intervalo (HH:MM).")
    notes: str = Field(default="", description="Motivo exibido no slot bloqueado.")

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _normalize_time(cls, value: object) -> str:
        return normalize_time_text(value)

    @model_validator(mode="after")
    def _check_order(self) -> FreeIntervalRequest:
        if to_minutes(self.start_time) >= to_minutes(self.end_time):
            raise ValueError("start_time deve ser anterior a end_time")
        return self

    def to_payload(self) -> dict[str, str]:
        return {
            "professional_id": self.professional_id,
            "appointment_date": self.appointment_date.isoformat(),
            "start_time": self.start_time,
            "end_time": self.end_time,
            "notes": self.notes,
        }


# Intervalo livre tem o mesmo formato de Appointment com status `free`.
FreeInterval = Appointment


def bookings_of(appointments: Sequence[Appointment]) -> list[Appointment]:
    """Filtra reservas efetivas preservando a ordem de entrada."""
    return [appt for appt in appointments if appt.is_booking]


def free_intervals_of(appointments: Sequence[Appointment]) -> list[Appointment]:
    """Filtra intervalos livres preservando a ordem de entrada."""
    return [appt for appt in appointments if appt.is_free_interval]


__all__ = [
    "Appointment",
    "AppointmentStatus",
    "FreeInterval",
    "FreeIntervalRequest",
    "bookings_of",
    "free_intervals_of",
]
