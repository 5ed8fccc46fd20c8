"""Conversoes de horario usadas pelo motor de disponibilidade.

Todo o motor trabalha com minutos desde a meia-noite. O texto "HH:MM"
aparece apenas nas bordas (payload do backend e rotulo renderizado).
"""

from __future__ import annotations

import re

from utils.errors import FormatError

GRID_STEP_MINUTES = 15
MINUTES_PER_DAY = 24 * 60

# Predicado auxiliar [15, 30). Diverge do filtro de encaixe [10, 30] em
# fit_slot_detector; os dois coexistem.
SHORT_GAP_MIN_MINUTES = 15
SHORT_GAP_MAX_MINUTES = 30

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2})(?:\.\d+)?)?$")
_TZ_SUFFIX = re.compile(r"[Zz+-]")


def to_minutes(text: str) -> int:
    """Converte "HH:MM" (ou "HH:MM:SS") em minutos desde a meia-noite.

    Raises:
        FormatError: texto nao numerico ou hora/minuto/segundo fora do intervalo.
    """
    if not isinstance(text, str):
        raise FormatError(text, "not_text")
    match = _TIME_PATTERN.match(text.strip())
    if match is None:
        raise FormatError(text, "malformed")
    hour = int(match.group(1))
    minute = int(match.group(2))
    if not 0 <= hour <= 23:
        raise FormatError(text, "hour_out_of_range")
    if not 0 <= minute <= 59:
        raise FormatError(text, "minute_out_of_range")
    if match.group(3) is not None and int(match.group(3)) > 59:
        raise FormatError(text, "second_out_of_range")
    return hour * 60 + minute


def to_text(minutes: int) -> str:
    """Inverso de to_minutes, com zero a esquerda e virada a cada 24h."""
    if minutes < 0:
        raise ValueError(f"minutes deve ser nao negativo, recebido: {minutes}")
    wrapped = minutes % MINUTES_PER_DAY
    return f"{wrapped // 60:02d}:{wrapped % 60:02d}"


def next_grid_boundary(minutes: int) -> int:
    """Menor multiplo de 15 maior ou igual a `minutes`."""
    remainder = minutes % GRID_STEP_MINUTES
    if remainder == 0:
        return minutes
    return minutes + (GRID_STEP_MINUTES - remainder)


def is_short_gap(start_minutes: int, end_minutes: int) -> bool:
    """True quando a lacuna esta em [15, 30) minutos.

    Nao e o filtro de encaixe: o detector aceita [10, 30]. A divergencia
    parece deriva entre duas versoes da mesma regra e fica sinalizada aqui.
    """
    gap = end_minutes - start_minutes
    return SHORT_GAP_MIN_MINUTES <= gap < SHORT_GAP_MAX_MINUTES


def normalize_time_text(value: object) -> str:
    """Normaliza horario vindo do backend para "HH:MM".

    Aceita "HH:MM", "HH:MM:SS" e timestamps com separador "T"
    (ex: "2025-05-27T13:17:00.000Z"). O horario e recortado do texto,
    sem conversao de timezone.
    """
    if not isinstance(value, str) or not value.strip():
        raise FormatError(value, "empty")
    raw = value.strip()
    if "T" in raw:
        raw = _TZ_SUFFIX.split(raw.split("T", 1)[1], maxsplit=1)[0]
    return to_text(to_minutes(raw))
