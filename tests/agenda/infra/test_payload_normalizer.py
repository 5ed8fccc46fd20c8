"""Testes da normalização dos payloads do backend de agenda."""

from __future__ import annotations

import datetime as dt
import logging

import pytest

from agenda.domain import AppointmentStatus
from agenda.infra.backend.payload_normalizer import (
    normalize_appointment,
    normalize_appointments,
    normalize_schedule,
    normalize_schedule_response,
)


class TestNormalizeScheduleResponse:
    """Resposta de GET /schedules/{professional_id}."""

    def test_maps_backend_fields(self) -> None:
        response = normalize_schedule_response(
            {
                "hasSchedule": True,
                "schedules": [
                    {
                        "day_of_week": "Monday",
                        "is_day_off": False,
                        "start_time": "08:00:00",
                        "end_time": "18:00:00",
                        "lunch_start_time": "12:00:00",
                        "lunch_end_time": "13:00:00",
                    },
                    {"dayOfWeek": "Sunday", "isDayOff": True},
                ],
            }
        )

        assert response.has_schedule is True
        monday, sunday = response.schedules
        assert monday.start_time == "08:00"
        assert monday.lunch_end_time == "13:00"
        assert sunday.is_day_off is True

    def test_invalid_schedule_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING, logger="agenda")
        response = normalize_schedule_response(
            {
                "schedules": [
                    {"day_of_week": "Monday", "start_time": "18:00", "end_time": "08:00"},
                    {"day_of_week": "Tuesday", "start_time": "08:00", "end_time": "18:00"},
                ]
            }
        )

        assert [schedule.day_of_week for schedule in response.schedules] == ["Tuesday"]
        assert response.has_schedule is True
        assert any(record.getMessage() == "agenda_record_skipped" for record in caplog.records)

    def test_non_object_payload_returns_empty_response(self) -> None:
        response = normalize_schedule_response(["unexpected"])
        assert response.has_schedule is False
        assert response.schedules == ()

    def test_specific_date_is_parsed(self) -> None:
        schedule = normalize_schedule(
            {"date": "2026-10-19T00:00:00.000Z", "start_time": "10:00", "end_time": "14:00"}
        )
        assert schedule is not None
        assert schedule.date == dt.date(2026, 10, 19)


class TestNormalizeAppointments:
    """Resposta de GET /schedules/{professional_id}/date/{YYYY-MM-DD}."""

    def test_accepts_wrapped_and_bare_lists(self) -> None:
        record = {"id": 1, "start_time": "09:00", "end_time": "09:30", "status": "confirmed"}
        assert len(normalize_appointments({"appointments": [record]})) == 1
        assert len(normalize_appointments([record])) == 1
        assert normalize_appointments({"appointments": None}) == []
        assert normalize_appointments("oops") == []

    def test_maps_aliases_and_nested_fields(self) -> None:
        appointment = normalize_appointment(
            {
                "id": 42,
                "startTime": "2026-10-19T09:00:00.000Z",
                "endTime": "2026-10-19T09:47:00.000Z",
                "status": "Cancelled",
                "appointment_date": "2026-10-19T00:00:00.000Z",
                "client": {"name": "Maria"},
                "services": [{"service_name": "Corte"}, {"service_name": ""}, "x"],
            }
        )

        assert appointment is not None
        assert appointment.id == "42"
        assert appointment.start_time == "09:00"
        assert appointment.end_time == "09:47"
        assert appointment.status is AppointmentStatus.CANCELED
        assert appointment.appointment_date == dt.date(2026, 10, 19)
        assert appointment.client_name == "Maria"
        assert appointment.service_names == ("Corte",)

    @pytest.mark.parametrize(
        ("raw_status", "expected"),
        [
            (None, AppointmentStatus.PENDING),
            ("", AppointmentStatus.PENDING),
            ("livre", AppointmentStatus.FREE),
            ("FREE", AppointmentStatus.FREE),
            ("completed", AppointmentStatus.COMPLETED),
        ],
    )
    def test_status_normalization(self, raw_status: object, expected: AppointmentStatus) -> None:
        appointment = normalize_appointment(
            {"start": "09:00", "end": "09:30", "status": raw_status}
        )
        assert appointment is not None
        assert appointment.status is expected

    def test_malformed_record_is_dropped_not_fatal(self) -> None:
        appointments = normalize_appointments(
            [
                {"id": "bad", "start_time": "nove horas", "end_time": "10:00"},
                {"id": "inverted", "start_time": "10:00", "end_time": "09:00"},
                {"id": "ok", "start_time": "11:00", "end_time": "11:30"},
                None,
            ]
        )
        assert [appointment.id for appointment in appointments] == ["ok"]

    def test_client_name_falls_back_to_flat_field(self) -> None:
        appointment = normalize_appointment(
            {"start_time": "09:00", "end_time": "09:30", "client_name": "João"}
        )
        assert appointment is not None
        assert appointment.client_name == "João"
