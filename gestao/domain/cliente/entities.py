# gestao/domain/cliente/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Cliente:
    """Cliente cadastrado. documento e sempre CPF ou CNPJ valido, so digitos."""

    id: int
    criado_em: datetime
    nome: str
    documento: str
    email: str
    telefone: str
