"""Testes da fusão de intervalos livres."""

from __future__ import annotations

from agenda.domain import Appointment, AppointmentStatus, TimeSpan
from agenda.services.free_interval_merger import (
    merge_free_intervals,
    merge_spans,
    span_containing,
)


def _free(start: str, end: str) -> Appointment:
    return Appointment(start_time=start, end_time=end, status=AppointmentStatus.FREE)


def test_overlapping_intervals_are_merged() -> None:
    merged = merge_free_intervals([_free("14:00", "15:00"), _free("14:30", "15:30")])
    assert merged == [TimeSpan(840, 930)]


def test_touching_intervals_are_merged() -> None:
    merged = merge_free_intervals([_free("10:00", "10:30"), _free("10:30", "11:00")])
    assert merged == [TimeSpan(600, 660)]


def test_disjoint_intervals_stay_apart_and_sorted() -> None:
    merged = merge_free_intervals([_free("16:00", "16:30"), _free("10:00", "10:30")])
    assert merged == [TimeSpan(600, 630), TimeSpan(960, 990)]


def test_contained_interval_is_absorbed() -> None:
    merged = merge_free_intervals([_free("09:00", "12:00"), _free("10:00", "10:15")])
    assert merged == [TimeSpan(540, 720)]


def test_only_free_records_are_merged() -> None:
    booking = Appointment(start_time="10:00", end_time="11:00")
    assert merge_free_intervals([booking]) == []


def test_merged_spans_are_disjoint_and_cover_inputs() -> None:
    inputs = [
        _free("08:00", "08:30"),
        _free("08:15", "09:00"),
        _free("11:00", "11:30"),
        _free("09:00", "09:15"),
    ]
    merged = merge_free_intervals(inputs)

    assert merged == [TimeSpan(480, 555), TimeSpan(660, 690)]
    for left, right in zip(merged, merged[1:]):
        assert left.end < right.start
    for record in inputs:
        assert any(
            span.start <= record.start_minutes and record.end_minutes <= span.end
            for span in merged
        )


def test_merge_spans_empty() -> None:
    assert merge_spans([]) == []


def test_span_containing_uses_closed_interval() -> None:
    spans = [TimeSpan(840, 930)]
    assert span_containing(spans, 930) == TimeSpan(840, 930)
    assert span_containing(spans, 931) is None


def test_merge_example_from_agenda() -> None:
    merged = merge_free_intervals(
        [_free("09:00", "09:30"), _free("09:30", "10:00"), _free("11:00", "11:15")]
    )
    assert [(span.start_time, span.end_time) for span in merged] == [
        ("09:00", "10:00"),
        ("11:00", "11:15"),
    ]


def test_merge_is_idempotent() -> None:
    merged = merge_free_intervals(
        [_free("08:00", "09:00"), _free("08:30", "10:00"), _free("13:00", "14:00")]
    )
    assert merge_spans(merged) == merged
