"""Endpoints da agenda (slots, opções de horário e intervalos livres)."""
