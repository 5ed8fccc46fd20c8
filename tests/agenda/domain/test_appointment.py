"""Testes dos modelos de agendamento e intervalo livre."""

from __future__ import annotations

import datetime as dt

import pytest
from pydantic import ValidationError

from agenda.domain import (
    Appointment,
    AppointmentStatus,
    FreeIntervalRequest,
    PresentedSlot,
    SlotKind,
    bookings_of,
    free_intervals_of,
)


def test_appointment_normalizes_timestamps() -> None:
    appointment = Appointment(
        start_time="2025-05-27T13:17:00.000Z",
        end_time="2025-05-27T14:00:00.000Z",
    )
    assert appointment.start_time == "13:17"
    assert appointment.end_time == "14:00"
    assert appointment.status is AppointmentStatus.PENDING


def test_appointment_requires_start_before_end() -> None:
    with pytest.raises(ValidationError):
        Appointment(start_time="10:00", end_time="10:00")


def test_status_helpers() -> None:
    booked = Appointment(start_time="09:00", end_time="09:30", status="confirmed")
    canceled = Appointment(start_time="10:00", end_time="10:30", status="canceled")
    free = Appointment(start_time="11:00", end_time="11:30", status="free")

    assert booked.is_booking and not booked.is_free_interval
    assert not canceled.is_booking and not canceled.is_free_interval
    assert free.is_free_interval and not free.is_booking
    assert bookings_of([booked, canceled, free]) == [booked]
    assert free_intervals_of([booked, canceled, free]) == [free]


class TestFreeIntervalRequest:
    """Validação do pedido de intervalo livre."""

    def test_payload(self) -> None:
        request = FreeIntervalRequest(
            professional_id="prof-1",
            appointment_date=dt.date(2026, 10, 19),
            start_time="15:00:00",
            end_time="16:00",
            notes="Reunião",
        )
        assert request.to_payload() == {
            "professional_id": "prof-1",
            "appointment_date": "2026-10-19",
            "start_time": "15:00",
            "end_time": "16:00",
            "notes": "Reunião",
        }

    def test_inverted_range_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FreeIntervalRequest(
                professional_id="prof-1",
                appointment_date=dt.date(2026, 10, 19),
                start_time="16:00",
                end_time="15:00",
            )

    def test_professional_is_required(self) -> None:
        with pytest.raises(ValidationError):
            FreeIntervalRequest(
                professional_id="",
                appointment_date=dt.date(2026, 10, 19),
                start_time="15:00",
                end_time="16:00",
            )


class TestPresentedSlot:
    """Rótulos e serialização do slot apresentado."""

    def test_label_for_ranges(self) -> None:
        slot = PresentedSlot(time="12:00", kind=SlotKind.LUNCH, end_time="13:00")
        assert slot.label == "12:00 - 13:00"
        assert slot.minutes == 720
        assert slot.is_bookable is False

    def test_label_for_booked_is_plain_time(self) -> None:
        slot = PresentedSlot(time="09:00", kind=SlotKind.BOOKED, end_time="09:47")
        assert slot.label == "09:00"

    def test_as_dict_includes_appointment(self) -> None:
        appointment = Appointment(
            id="a1",
            start_time="09:00",
            end_time="09:30",
            status="confirmed",
            client_name="Maria",
            service_names=("Corte",),
        )
        slot = PresentedSlot(
            time="09:00",
            kind=SlotKind.BOOKED,
            end_time="09:30",
            appointment=appointment,
        )
        payload = slot.as_dict()
        assert payload["kind"] == "booked"
        assert payload["bookable"] is False
        assert payload["appointment"]["service_names"] == ["Corte"]
