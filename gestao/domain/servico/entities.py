# gestao/domain/servico/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .enums import UnidadeTempo


@dataclass(frozen=True)
class Servico:
    """Servico oferecido. tempo_estimado e sempre inteiro positivo na unidade_tempo."""

    id: int
    criado_em: datetime
    nome: str
    descricao: str
    tempo_estimado: int
    unidade_tempo: UnidadeTempo = UnidadeTempo.HORAS
