"""Bootstrap da agenda: composition root.

Configura logging, valida settings e conecta o cliente HTTP concreto ao
AgendaBackendProtocol.

Uso:
    from agenda.bootstrap import create_agenda_backend, initialize_app

    initialize_app()
    backend = create_agenda_backend()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from agenda.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_agenda_settings, get_base_settings

if TYPE_CHECKING:
    from agenda.protocols import AgendaBackendProtocol

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
        json_output=not (base.is_development and base.debug),
    )


def initialize_test_app() -> None:
    """Logging em DEBUG com formatter de texto, para testes."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
        json_output=False,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` apenas registra alerta e devolve os erros.

    Raises:
        RuntimeError: configuração inválida em ambiente estrito.
    """
    base = get_base_settings()
    environment = base.environment
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"agenda: {error}" for error in get_agenda_settings().validate_settings())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")
    return errors


def create_agenda_backend() -> AgendaBackendProtocol:
    """Cria o backend HTTP a partir das settings de ambiente."""
    from agenda.infra import HttpAgendaBackend

    return HttpAgendaBackend(get_agenda_settings())
