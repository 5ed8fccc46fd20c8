"""Endpoints HTTP da agenda de um profissional e da grade da equipe.

A carga de um profissional passa pelo AgendaLoader: falhas do backend ou do cálculo
chegam como lista vazia + `error` no corpo (HTTP 200), nunca como lista
parcial. Apenas a criação de intervalo livre devolve 422/502.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any
from zoneinfo import ZoneInfo

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from agenda.domain import FreeIntervalRequest
from agenda.protocols.agenda_backend import AgendaBackendProtocol
from agenda.services.agenda_loader import AgendaLoader, AgendaSnapshot, load_team_grid
from config.settings import get_agenda_settings
from utils.errors import BackendUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter()


class FreeIntervalBody(BaseModel):
    """Corpo do POST de intervalo livre (o profissional vem do path)."""

    model_config = ConfigDict(extra="ignore")

    appointment_date: dt.date = Field(..., description="Data do intervalo (YYYY-MM-DD).")
    start_time: str = Field(..., description="Inicio (HH:MM).")
    end_time: str = Field(..., description="Fim (HH:MM).")
    notes: str = Field(default="", description="Motivo do bloqueio.")


def _today() -> dt.date:
    return dt.datetime.now(ZoneInfo(get_agenda_settings().agenda_timezone)).date()


def _backend(request: Request) -> AgendaBackendProtocol:
    backend = getattr(request.app.state, "agenda_backend", None)
    if backend is None:
        raise HTTPException(status_code=503, detail="agenda_backend_not_configured")
    return backend


def _loader(request: Request, professional_id: str) -> AgendaLoader:
    return AgendaLoader(_backend(request), professional_id)


def _require_snapshot(snapshot: AgendaSnapshot | None) -> AgendaSnapshot:
    if snapshot is None:
        raise HTTPException(status_code=409, detail="agenda_load_superseded")
    return snapshot


async def _load(request: Request, professional_id: str, day: dt.date | None) -> AgendaSnapshot:
    snapshot = await _loader(request, professional_id).load(day or _today())
    return _require_snapshot(snapshot)


@router.get("/team-grid")
async def get_team_grid(
    request: Request,
    professional_id: list[str] = Query(..., description="Profissionais da grade (repetivel)."),
    date: dt.date | None = Query(default=None, description="Data (YYYY-MM-DD); padrão hoje."),
) -> dict[str, Any]:
    """Grade multi-profissional: janela comum e horários de expediente de cada um."""
    team_grid = await load_team_grid(_backend(request), professional_id, date or _today())
    return team_grid.as_dict()


@router.get("/{professional_id}/slots")
async def get_slots(
    request: Request,
    professional_id: str,
    date: dt.date | None = Query(default=None, description="Data (YYYY-MM-DD); padrão hoje."),
) -> dict[str, Any]:
    """Slots apresentados do dia, ordenados por horário."""
    snapshot = await _load(request, professional_id, date)
    return snapshot.as_dict()


@router.get("/{professional_id}/available-hours")
async def get_available_hours(
    request: Request,
    professional_id: str,
    date: dt.date | None = Query(default=None),
) -> dict[str, Any]:
    """Horas com slot livre para o formulário de intervalo livre."""
    snapshot = await _load(request, professional_id, date)
    return {
        "date": snapshot.day.isoformat(),
        "hours": snapshot.available_hours(),
        "error": snapshot.error,
    }


@router.get("/{professional_id}/available-minutes")
async def get_available_minutes(
    request: Request,
    professional_id: str,
    hour: str = Query(..., pattern=r"^\d{1,2}$"),
    date: dt.date | None = Query(default=None),
) -> dict[str, Any]:
    """Minutos livres dentro da hora escolhida."""
    snapshot = await _load(request, professional_id, date)
    return {
        "date": snapshot.day.isoformat(),
        "hour": hour.zfill(2),
        "minutes": snapshot.available_minutes(hour),
        "error": snapshot.error,
    }


@router.post("/{professional_id}/free-intervals", status_code=201)
async def create_free_interval(
    request: Request,
    professional_id: str,
    body: FreeIntervalBody,
) -> dict[str, Any]:
    """Declara intervalo livre e devolve a agenda recarregada da data."""
    try:
        free_interval = FreeIntervalRequest(
            professional_id=professional_id,
            appointment_date=body.appointment_date,
            start_time=body.start_time,
            end_time=body.end_time,
            notes=body.notes,
        )
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=[error["msg"] for error in exc.errors()],
        ) from exc

    loader = _loader(request, professional_id)
    try:
        snapshot = await loader.create_free_interval(free_interval)
    except BackendUnavailableError as exc:
        logger.warning(
            "agenda_free_interval_create_failed",
            extra={"day": body.appointment_date.isoformat(), "error": str(exc)},
        )
        raise HTTPException(status_code=502, detail="Erro ao criar intervalo livre") from exc

    return _require_snapshot(snapshot).as_dict()
