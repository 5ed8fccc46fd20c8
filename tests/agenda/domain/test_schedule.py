"""Testes do modelo de expediente."""

from __future__ import annotations

import datetime as dt

import pytest
from pydantic import ValidationError

from agenda.domain import WorkSchedule

MONDAY = dt.date(2026, 10, 19)


class TestWorkSchedule:
    """Validação e normalização de WorkSchedule."""

    def test_times_are_normalized(self) -> None:
        schedule = WorkSchedule(
            day_of_week="monday",
            start_time="08:00:00",
            end_time="2026-10-19T18:00:00.000Z",
        )
        assert schedule.day_of_week == "Monday"
        assert schedule.start_time == "08:00"
        assert schedule.end_time == "18:00"
        assert schedule.start_minutes == 480
        assert schedule.end_minutes == 1080

    def test_start_after_end_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WorkSchedule(day_of_week="Monday", start_time="18:00", end_time="08:00")

    def test_lunch_order_is_validated(self) -> None:
        with pytest.raises(ValidationError):
            WorkSchedule(
                start_time="08:00",
                end_time="18:00",
                lunch_start_time="13:00",
                lunch_end_time="12:00",
            )

    def test_lunch_outside_working_hours_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WorkSchedule(
                start_time="08:00",
                end_time="12:00",
                lunch_start_time="12:00",
                lunch_end_time="13:00",
            )

    def test_malformed_time_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WorkSchedule(start_time="8h", end_time="18:00")

    def test_unknown_weekday_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WorkSchedule(day_of_week="Segunda")

    def test_day_off_accepts_inconsistent_hours(self) -> None:
        schedule = WorkSchedule(is_day_off=True, start_time="bad", end_time="08:00")
        assert schedule.start_time is None
        assert schedule.is_day_off is True

    def test_empty_strings_mean_missing(self) -> None:
        schedule = WorkSchedule(start_time="", end_time="  ", lunch_start_time="")
        assert schedule.has_working_hours is False
        assert schedule.has_lunch is False

    def test_applies_to(self) -> None:
        assert WorkSchedule(day_of_week="Monday").applies_to(MONDAY) is True
        assert WorkSchedule(day_of_week="Tuesday").applies_to(MONDAY) is False
        assert WorkSchedule(date=MONDAY, day_of_week="Tuesday").applies_to(MONDAY) is True
        assert WorkSchedule().applies_to(MONDAY) is True
