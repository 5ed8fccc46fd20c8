"""Rotas HTTP: adapters de entrada do agenda-encaixe.

- routes/health/: liveness e readiness
- routes/agenda/: slots do dia, opções do formulário e intervalos livres
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
