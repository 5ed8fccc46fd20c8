"""API: camada de borda HTTP do agenda-encaixe.

Recebe requests, valida parâmetros e delega ao AgendaLoader. Não contém
regras de montagem de slots (ficam em agenda/services).
"""
