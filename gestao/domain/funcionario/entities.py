# gestao/domain/funcionario/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .enums import NivelAcesso, StatusFuncionario


@dataclass(frozen=True)
class Funcionario:
    id: int
    criado_em: datetime
    nome: str
    cargo: str
    email: str
    telefone: str
    papel: NivelAcesso = NivelAcesso.FUNCIONARIO
    status: StatusFuncionario = StatusFuncionario.ATIVO
