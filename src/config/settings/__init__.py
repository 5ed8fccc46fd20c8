"""Settings do agenda-encaixe carregadas de variáveis de ambiente.

- base: ENVIRONMENT, SERVICE_NAME, DEBUG, LOG_LEVEL
- agenda: AGENDA_BACKEND_URL, AGENDA_BACKEND_TOKEN, AGENDA_COMPANY_ID,
  AGENDA_BACKEND_TIMEOUT_SECONDS, AGENDA_TIMEZONE
"""

from __future__ import annotations

from config.settings.agenda import AgendaSettings, get_agenda_settings
from config.settings.base import BaseSettings, Environment, get_base_settings

__all__ = [
    "AgendaSettings",
    "BaseSettings",
    "Environment",
    "get_agenda_settings",
    "get_base_settings",
]
