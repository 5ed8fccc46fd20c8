"""Cliente HTTP do backend de agenda.

Implementacao concreta de IO (pertence a agenda/infra). Converte toda
resposta via payload_normalizer antes de devolver ao motor.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from agenda.infra.backend.payload_normalizer import (
    normalize_appointment,
    normalize_appointments,
    normalize_schedule_response,
)
from utils.errors import BackendUnavailableError

if TYPE_CHECKING:
    import datetime as dt

    from agenda.domain.appointment import Appointment, FreeIntervalRequest
    from agenda.domain.schedule import ScheduleResponse
    from config.settings.agenda import AgendaSettings

logger = logging.getLogger(__name__)


class HttpAgendaBackend:
    """Implementa AgendaBackendProtocol sobre a API REST de agenda.

    Falhas de rede/HTTP viram BackendUnavailableError; o chamador decide
    como apresentar o erro (lista vazia + mensagem).
    """

    __slots__ = ("_http_client", "_owns_client", "_settings")

    def __init__(
        self,
        settings: AgendaSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        from config.settings.agenda import get_agenda_settings

        self._settings = settings or get_agenda_settings()
        self._http_client = http_client
        self._owns_client = http_client is None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Obtém ou cria cliente HTTP."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self._settings.backend_base_url,
                timeout=self._settings.request_timeout_seconds,
            )
        return self._http_client

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "company_id": self._settings.company_id,
        }
        if self._settings.backend_token:
            headers["Authorization"] = f"Bearer {self._settings.backend_token}"
        return headers

    async def get_schedule(self, professional_id: str) -> ScheduleResponse:
        payload = await self._request("GET", f"/schedules/{professional_id}", op="get_schedule")
        return normalize_schedule_response(payload)

    async def get_appointments(self, professional_id: str, day: dt.date) -> list[Appointment]:
        payload = await self._request(
            "GET",
            f"/schedules/{professional_id}/date/{day.isoformat()}",
            op="get_appointments",
        )
        return normalize_appointments(payload)

    async def create_free_interval(self, request: FreeIntervalRequest) -> Appointment | None:
        payload = await self._request(
            "POST",
            "/schedules/free-interval",
            op="create_free_interval",
            json=request.to_payload(),
        )
        if isinstance(payload, dict):
            record = payload.get("appointment", payload)
            if isinstance(record, dict) and record.get("status") is None:
                record = {**record, "status": "free"}
            return normalize_appointment(record)
        return None

    async def aclose(self) -> None:
        """Fecha o cliente HTTP quando foi criado aqui."""
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def _request(
        self,
        method: str,
        path: str,
        *,
        op: str,
        json: dict[str, Any] | None = None,
    ) -> Any:
        client = await self._get_http_client()
        try:
            response = await client.request(method, path, headers=self._headers(), json=json)
            response.raise_for_status()
            return response.json()
        except httpx.TimeoutException as exc:
            logger.warning(
                "agenda_backend_timeout",
                extra={"op": op, "timeout": self._settings.request_timeout_seconds},
            )
            raise BackendUnavailableError(f"{op}: timeout") from exc
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "agenda_backend_http_error",
                extra={"op": op, "status_code": exc.response.status_code},
            )
            raise BackendUnavailableError(f"{op}: HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "agenda_backend_request_failed",
                extra={"op": op, "error_type": type(exc).__name__},
            )
            raise BackendUnavailableError(f"{op}: {type(exc).__name__}") from exc
        except ValueError as exc:
            logger.warning("agenda_backend_invalid_json", extra={"op": op})
            raise BackendUnavailableError(f"{op}: invalid_json") from exc
