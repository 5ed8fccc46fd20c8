"""Servicos do motor de disponibilidade.

Funcoes puras e sincronas (sem IO direto); a unica borda assincrona e o
AgendaLoader. Implementacoes concretas de IO ficam em agenda/infra/.

Importar os modulos diretamente (ex: `agenda.services.slot_assembler`);
este pacote nao re-exporta nada.
"""
