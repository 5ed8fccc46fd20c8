"""Testes de pertinência de horários em reservas e intervalos livres."""

from __future__ import annotations

from agenda.domain import Appointment, AppointmentStatus
from agenda.services.interval_classifier import IntervalClassifier, slot_minutes


def _appt(
    start: str,
    end: str,
    status: AppointmentStatus = AppointmentStatus.CONFIRMED,
    appt_id: str = "",
) -> Appointment:
    return Appointment(id=appt_id, start_time=start, end_time=end, status=status)


def test_booking_containment_is_half_open() -> None:
    classifier = IntervalClassifier([_appt("09:00", "09:30")])

    assert classifier.is_booked("09:00") is True
    assert classifier.is_booked("09:15") is True
    assert classifier.is_booked("09:30") is False
    assert classifier.is_booked("08:45") is False


def test_free_interval_containment_is_closed() -> None:
    classifier = IntervalClassifier([_appt("14:00", "15:00", AppointmentStatus.FREE)])

    assert classifier.is_free_interval_member("14:00") is True
    assert classifier.is_free_interval_member("15:00") is True
    assert classifier.is_free_interval_member("15:15") is False


def test_canceled_and_free_records_are_not_bookings() -> None:
    classifier = IntervalClassifier(
        [
            _appt("09:00", "10:00", AppointmentStatus.CANCELED),
            _appt("10:00", "11:00", AppointmentStatus.FREE),
        ]
    )

    assert classifier.is_booked("09:00") is False
    assert classifier.is_booked("10:00") is False
    assert classifier.bookings == ()
    assert len(classifier.free_intervals) == 1


def test_pending_and_completed_count_as_bookings() -> None:
    classifier = IntervalClassifier(
        [
            _appt("09:00", "09:30", AppointmentStatus.PENDING),
            _appt("10:00", "10:30", AppointmentStatus.COMPLETED),
        ]
    )
    assert classifier.is_booked("09:00") is True
    assert classifier.is_booked("10:15") is True


def test_overlapping_bookings_first_match_wins() -> None:
    first = _appt("09:00", "10:00", appt_id="a")
    second = _appt("09:30", "10:30", appt_id="b")
    classifier = IntervalClassifier([first, second])

    assert classifier.appointment_at("09:45") is first
    assert classifier.appointment_at("10:15") is second


def test_start_queries() -> None:
    classifier = IntervalClassifier(
        [
            _appt("09:10", "09:40"),
            _appt("14:00", "15:00", AppointmentStatus.FREE),
        ]
    )

    assert classifier.is_booking_start("09:10") is True
    assert classifier.is_booking_start("09:15") is False
    assert classifier.is_free_interval_start("14:00") is True
    assert classifier.is_free_interval_start("09:10") is False


def test_accepts_minutes_and_backend_formats() -> None:
    classifier = IntervalClassifier([_appt("09:00", "09:30")])

    assert classifier.is_booked(545) is True
    assert classifier.is_booked("09:15:00") is True
    assert classifier.is_booked("2026-10-19T09:20:00.000Z") is True
    assert slot_minutes("2026-10-19T09:20:00.000Z") == 560
