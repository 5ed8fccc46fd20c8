"""Testes das opções de hora/minuto do formulário de intervalo livre."""

from __future__ import annotations

import datetime as dt

from agenda.domain import Appointment, AppointmentStatus, WorkSchedule
from agenda.services.interval_classifier import IntervalClassifier
from agenda.services.slot_grid import generate_day_grid
from agenda.services.slot_pickers import available_hours, available_minutes

MONDAY = dt.date(2026, 10, 19)


def _setup() -> tuple:
    schedule = WorkSchedule(
        day_of_week="Monday",
        start_time="08:00",
        end_time="18:00",
        lunch_start_time="12:00",
        lunch_end_time="13:00",
    )
    appointments = [
        Appointment(start_time="09:00", end_time="09:47"),
        Appointment(start_time="14:00", end_time="15:30", status=AppointmentStatus.FREE),
    ]
    return generate_day_grid(schedule, MONDAY), IntervalClassifier(appointments)


def test_hours_skip_fully_occupied_hours_and_lunch() -> None:
    grid, classifier = _setup()
    assert available_hours(grid, classifier) == ["08", "10", "11", "13", "15", "16", "17"]


def test_minutes_exclude_booked_and_free_slots() -> None:
    grid, classifier = _setup()

    assert available_minutes(grid, classifier, "08") == ["00", "15", "30", "45"]
    assert available_minutes(grid, classifier, "15") == ["45"]
    assert available_minutes(grid, classifier, "14") == []


def test_hour_without_leading_zero_is_accepted() -> None:
    grid, classifier = _setup()
    assert available_minutes(grid, classifier, "8") == ["00", "15", "30", "45"]
    assert available_minutes(grid, classifier, "9") == []


def test_closed_day_has_no_options() -> None:
    grid = generate_day_grid(None, MONDAY)
    classifier = IntervalClassifier([])
    assert available_hours(grid, classifier) == []
