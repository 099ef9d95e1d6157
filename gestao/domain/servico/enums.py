# gestao/domain/servico/enums.py
from __future__ import annotations

from enum import Enum


class UnidadeTempo(str, Enum):
    HORAS = "hours"
    DIAS = "days"
    SEMANAS = "weeks"
