"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AgendaError,
    BackendUnavailableError,
    FormatError,
    ScheduleMissingError,
)

__all__ = [
    "AgendaError",
    "BackendUnavailableError",
    "FormatError",
    "ScheduleMissingError",
]
