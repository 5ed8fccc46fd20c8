"""Agenda: motor de disponibilidade de horarios (slots e encaixes).

Subpastas:
- domain/: modelos (expediente, agendamentos, slots derivados)
- services/: grade, classificador, fusao de intervalos, encaixes, montagem
- protocols/: contratos com o backend de agenda
- infra/: implementacoes concretas de IO (HTTP + normalizacao de payload)
- bootstrap/: composition root (logging, wiring)
- observability/: correlation_id para logs estruturados

Padrao: services calculam; infra busca; api adapta.
"""
