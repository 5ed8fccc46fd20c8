"""Normalizacao dos payloads do backend de agenda para o dominio.

O backend devolve campos opcionais, nomes alternativos e horarios ora em
"HH:MM:SS", ora como timestamp ISO. Esta borda e a unica que ve o payload
bruto: o motor recebe apenas Appointment/WorkSchedule validados.

Um registro malformado e descartado com log; nunca derruba o dia inteiro.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from agenda.domain.appointment import Appointment, AppointmentStatus
from agenda.domain.schedule import ScheduleResponse, WorkSchedule
from utils.errors import FormatError

logger = logging.getLogger(__name__)

_STATUS_ALIASES = {
    "cancelled": AppointmentStatus.CANCELED.value,
    "canceled": AppointmentStatus.CANCELED.value,
    "livre": AppointmentStatus.FREE.value,
}

_START_KEYS = ("start_time", "startTime", "start")
_END_KEYS = ("end_time", "endTime", "end")
_LUNCH_START_KEYS = ("lunch_start_time", "lunchStartTime", "lunch_start")
_LUNCH_END_KEYS = ("lunch_end_time", "lunchEndTime", "lunch_end")


def normalize_schedule_response(payload: Any) -> ScheduleResponse:
    """Converte a resposta de GetSchedule, descartando escalas invalidas."""
    if not isinstance(payload, dict):
        logger.warning("agenda_schedule_payload_invalid", extra={"type": type(payload).__name__})
        return ScheduleResponse()

    raw_schedules = payload.get("schedules")
    if not isinstance(raw_schedules, list):
        raw_schedules = []

    schedules = tuple(
        schedule
        for schedule in (normalize_schedule(item) for item in raw_schedules)
        if schedule is not None
    )
    has_schedule = payload.get("hasSchedule", payload.get("has_schedule"))
    return ScheduleResponse(
        has_schedule=bool(has_schedule) if has_schedule is not None else bool(schedules),
        schedules=schedules,
    )


def normalize_schedule(item: Any) -> WorkSchedule | None:
    """Mapeia uma escala bruta; retorna None (com log) se for invalida."""
    if not isinstance(item, dict):
        _log_skipped("schedule", "not_an_object")
        return None
    try:
        return WorkSchedule(
            day_of_week=_first(item, ("day_of_week", "dayOfWeek")),
            date=_date_part(_first(item, ("date", "specific_date"))),
            is_day_off=bool(_first(item, ("is_day_off", "isDayOff")) or False),
            start_time=_first(item, _START_KEYS),
            end_time=_first(item, _END_KEYS),
            lunch_start_time=_first(item, _LUNCH_START_KEYS),
            lunch_end_time=_first(item, _LUNCH_END_KEYS),
        )
    except (ValidationError, FormatError) as exc:
        _log_skipped("schedule", _reason(exc))
        return None


def normalize_appointments(payload: Any) -> list[Appointment]:
    """Converte a resposta de GetAppointments (lista ou {"appointments": [...]})."""
    if isinstance(payload, dict):
        payload = payload.get("appointments")
    if not isinstance(payload, list):
        return []
    return [
        appointment
        for appointment in (normalize_appointment(item) for item in payload)
        if appointment is not None
    ]


def normalize_appointment(item: Any) -> Appointment | None:
    """Mapeia um agendamento bruto; retorna None (com log) se for invalido."""
    if not isinstance(item, dict):
        _log_skipped("appointment", "not_an_object")
        return None

    client = item.get("client")
    client_name = client.get("name") if isinstance(client, dict) else item.get("client_name")
    service_names = _service_names(item.get("services"))

    try:
        return Appointment(
            id=str(item.get("id") or ""),
            start_time=_first(item, _START_KEYS),
            end_time=_first(item, _END_KEYS),
            status=_normalize_status(item.get("status")),
            appointment_date=_date_part(_first(item, ("appointment_date", "appointmentDate"))),
            notes=str(item.get("notes") or ""),
            client_name=client_name or None,
            service_names=service_names,
        )
    except (ValidationError, FormatError) as exc:
        _log_skipped("appointment", _reason(exc), record_id=item.get("id"))
        return None


def _service_names(services: Any) -> tuple[str, ...]:
    if not isinstance(services, list):
        return ()
    return tuple(
        str(service["service_name"])
        for service in services
        if isinstance(service, dict) and service.get("service_name")
    )


def _normalize_status(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        return AppointmentStatus.PENDING.value
    lowered = value.strip().lower()
    return _STATUS_ALIASES.get(lowered, lowered)


def _first(item: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = item.get(key)
        if value is not None:
            return value
    return None


def _date_part(value: Any) -> str | None:
    """Recorta "YYYY-MM-DD" de uma data ou timestamp ISO."""
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip().split("T", 1)[0]


def _reason(exc: Exception) -> str:
    if isinstance(exc, FormatError):
        return exc.reason
    if isinstance(exc, ValidationError):
        errors = exc.errors()
        if errors:
            location = ".".join(str(part) for part in errors[0].get("loc", ()))
            return f"{errors[0].get('type', 'invalid')}:{location}" if location else "invalid"
    return "invalid"


def _log_skipped(kind: str, reason: str, *, record_id: Any = None) -> None:
    logger.warning(
        "agenda_record_skipped",
        extra={"kind": kind, "reason": reason, "record_id": str(record_id or "")},
    )
