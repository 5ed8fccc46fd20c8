"""Endpoints de liveness e readiness."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_agenda_settings, get_base_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness: backend de agenda construído e settings válidas."""
    backend_check = _check_backend(getattr(request.app.state, "agenda_backend", None))
    settings_check = _check_settings()
    ready = backend_check.status == "ok" and settings_check.status != "failed"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "agenda_backend": backend_check.as_dict(),
            "settings": settings_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_backend(backend: Any | None) -> DependencyCheck:
    if backend is None:
        return DependencyCheck(status="failed", error="not_configured")
    return DependencyCheck(status="ok")


def _check_settings() -> DependencyCheck:
    errors = get_agenda_settings().validate_settings()
    if errors:
        # Token ausente não impede leitura em backends abertos
        return DependencyCheck(status="degraded", error="; ".join(errors))
    return DependencyCheck(status="ok")
