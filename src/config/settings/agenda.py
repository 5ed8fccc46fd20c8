"""Settings de integracao com o backend de agenda (AGENDA_* no ambiente)."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


class AgendaSettings(BaseModel):
    """Configuracoes do cliente HTTP do backend de agenda."""

    model_config = ConfigDict(extra="ignore")

    backend_base_url: str = Field(
        default="https://api.linkcallendar.com",
        description="URL base do backend que expoe escalas e agendamentos.",
    )
    backend_token: str | None = Field(
        default=None,
        description="Bearer token enviado no header Authorization.",
    )
    company_id: str = Field(
        default="0",
        description="Empresa enviada no header company_id.",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout por requisicao ao backend.",
    )
    agenda_timezone: str = Field(
        default="America/Sao_Paulo",
        description="Timezone usado para resolver a data corrente na API.",
    )

    def validate_settings(self) -> list[str]:
        """Retorna lista de erros (vazia = OK)."""
        errors: list[str] = []
        if not self.backend_base_url.startswith(("http://", "https://")):
            errors.append(f"AGENDA_BACKEND_URL inválida: {self.backend_base_url}")
        if not self.backend_token:
            errors.append("AGENDA_BACKEND_TOKEN não configurado")
        return errors


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _load_agenda_from_env() -> AgendaSettings:
    """Carrega AgendaSettings a partir de variaveis de ambiente."""
    return AgendaSettings(
        backend_base_url=os.getenv("AGENDA_BACKEND_URL", "https://api.linkcallendar.com"),
        backend_token=_read_optional_env("AGENDA_BACKEND_TOKEN"),
        company_id=os.getenv("AGENDA_COMPANY_ID", "0"),
        request_timeout_seconds=float(os.getenv("AGENDA_BACKEND_TIMEOUT_SECONDS", "10")),
        agenda_timezone=os.getenv("AGENDA_TIMEZONE", "America/Sao_Paulo"),
    )


@lru_cache(maxsize=1)
def get_agenda_settings() -> AgendaSettings:
    """Retorna instancia cacheada de AgendaSettings."""
    return _load_agenda_from_env()


__all__ = ["AgendaSettings", "get_agenda_settings"]
