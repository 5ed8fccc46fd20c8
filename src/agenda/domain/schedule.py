"""Modelos de dominio para expediente do profissional.

O backend devolve uma escala por dia da semana; o motor so enxerga a
versao normalizada (horarios em "HH:MM"), nunca o payload bruto.
"""

from __future__ import annotations

import datetime as dt

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

from agenda.services.time_utils import normalize_time_text, to_minutes
from utils.errors import FormatError

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class WorkSchedule(BaseModel):
    """Expediente de um profissional para um dia da semana ou data especifica."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    day_of_week: str | None = Field(
        default=None,
        description="Dia da semana em ingles (Monday..Sunday), como o backend envia.",
    )
    date: dt.date | None = Field(
        default=None,
        description="Data especifica; quando presente tem prioridade sobre o dia da semana.",
    )
    is_day_off: bool = Field(default=False, description="Dia de folga: nenhum slot e gerado.")
    start_time: str | None = Field(default=None, description="Inicio do expediente (HH:MM).")
    end_time: str | None = Field(default=None, description="Fim do expediente (HH:MM).")
    lunch_start_time: str | None = Field(default=None, description="Inicio do almoco (HH:MM).")
    lunch_end_time: str | None = Field(default=None, description="Fim do almoco (HH:MM).")

    @field_validator("day_of_week")
    @classmethod
    def _check_weekday(cls, value: str | None) -> str | None:
        if value is None:
            return None
        normalized = value.strip().capitalize()
        if normalized not in WEEKDAY_NAMES:
            raise ValueError(f"day_of_week invalido: {value}")
        return normalized

    @field_validator("start_time", "end_time", "lunch_start_time", "lunch_end_time", mode="before")
    @classmethod
    def _normalize_time(cls, value: object, info: ValidationInfo) -> str | None:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        try:
            return normalize_time_text(value)
        except FormatError:
            # Em dia de folga os horarios sao ignorados, mesmo malformados.
            if info.data.get("is_day_off"):
                return None
            raise

    @model_validator(mode="after")
    def _check_bounds(self) -> WorkSchedule:
        # Folga com horarios quaisquer continua valida: simplesmente nao gera slots.
        if self.is_day_off or not self.has_working_hours:
            return self
        if self.start_minutes >= self.end_minutes:
            raise ValueError("start_time deve ser anterior a end_time")
        if self.has_lunch:
            lunch_start, lunch_end = self.lunch_minutes
            if lunch_start >= lunch_end:
                raise ValueError("lunch_start_time deve ser anterior a lunch_end_time")
            if lunch_start < self.start_minutes or lunch_end > self.end_minutes:
                raise ValueError("almoco deve estar dentro do expediente")
        return self

    @property
    def has_working_hours(self) -> bool:
        return bool(self.start_time and self.end_time)

    @property
    def has_lunch(self) -> bool:
        return bool(self.lunch_start_time and self.lunch_end_time)

    @property
    def start_minutes(self) -> int:
        return to_minutes(self.start_time or "")

    @property
    def end_minutes(self) -> int:
        return to_minutes(self.end_time or "")

    @property
    def lunch_minutes(self) -> tuple[int, int]:
        return to_minutes(self.lunch_start_time or ""), to_minutes(self.lunch_end_time or "")

    def applies_to(self, day: dt.date) -> bool:
        """Indica se a escala vale para a data informada."""
        if self.date is not None:
            return self.date == day
        if self.day_of_week is not None:
            return self.day_of_week == WEEKDAY_NAMES[day.weekday()]
        return True


class ScheduleResponse(BaseModel):
    """Resposta de GetSchedule: uma escala por dia da semana."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    has_schedule: bool = Field(default=False, description="Profissional possui escala.")
    schedules: tuple[WorkSchedule, ...] = Field(default=(), description="Escalas cadastradas.")


__all__ = ["WEEKDAY_NAMES", "ScheduleResponse", "WorkSchedule"]
