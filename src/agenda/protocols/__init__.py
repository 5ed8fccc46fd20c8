"""Protocolos e contratos do motor de agenda."""

from .agenda_backend import AgendaBackendProtocol

__all__ = ["AgendaBackendProtocol"]
