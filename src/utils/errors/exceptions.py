"""Exceções do motor de disponibilidade da agenda."""

from __future__ import annotations


class AgendaError(Exception):
    """Base para falhas do motor de agenda."""


class FormatError(AgendaError, ValueError):
    """Texto de horario malformado (esperado HH:MM)."""

    def __init__(self, value: object, reason: str = "invalid_time") -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Horario invalido ({reason}): {value!r}")


class ScheduleMissingError(AgendaError):
    """Nao existe expediente para a data (sem escala ou dia de folga).

    Nao e falha: representa o resultado "sem horarios hoje" e deve virar
    uma grade vazia e valida.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Sem expediente para a data: {reason}")


class BackendUnavailableError(AgendaError):
    """Falha transitoria ao consultar o backend de agenda."""
