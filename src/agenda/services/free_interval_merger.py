"""Fusao de intervalos livres sobrepostos ou encostados."""

from __future__ import annotations

from typing import TYPE_CHECKING

from agenda.domain.slot import TimeSpan

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from agenda.domain.appointment import Appointment


def merge_free_intervals(appointments: Sequence[Appointment]) -> list[TimeSpan]:
    """Funde os registros `free` do dia em intervalos maximos disjuntos.

    Registros de outros status sao ignorados. Dois intervalos se juntam
    quando o proximo comeca antes ou exatamente no fim do atual.
    """
    spans = (
        TimeSpan(appt.start_minutes, appt.end_minutes)
        for appt in appointments
        if appt.is_free_interval
    )
    return merge_spans(spans)


def merge_spans(spans: Iterable[TimeSpan]) -> list[TimeSpan]:
    """Fold a esquerda sobre spans ordenados por inicio."""
    ordered = sorted(spans, key=lambda span: (span.start, span.end))
    if not ordered:
        return []

    merged: list[TimeSpan] = []
    current = ordered[0]
    for span in ordered[1:]:
        if span.start <= current.end:
            current = TimeSpan(current.start, max(current.end, span.end))
            continue
        merged.append(current)
        current = span
    merged.append(current)
    return merged


def span_containing(spans: Sequence[TimeSpan], minutes: int) -> TimeSpan | None:
    """Span fundido que contem o minuto (intervalo fechado)."""
    for span in spans:
        if span.contains(minutes):
            return span
    return None
