# gestao/domain/funcionario/enums.py
from __future__ import annotations

from enum import Enum


class StatusFuncionario(str, Enum):
    ATIVO = "active"
    INATIVO = "inactive"


class NivelAcesso(str, Enum):
    """Hierarquia de acesso. Ordem total: a posicao na declaracao e o nivel."""

    FUNCIONARIO = "funcionario"
    TECNICO = "tecnico"
    SUPERVISOR = "supervisor"
    COORDENADOR = "coordenador"
    GERENTE = "gerente"
    DIRETOR = "diretor"
    ADMIN = "admin"

    @property
    def ordem(self) -> int:
        return _HIERARQUIA.index(self)

    # str ja define comparacao lexicografica; aqui vale a hierarquia.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NivelAcesso):
            return NotImplemented
        return self.ordem < other.ordem

    def __le__(self, other: object) -> bool:
        if not isinstance(other, NivelAcesso):
            return NotImplemented
        return self.ordem <= other.ordem

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, NivelAcesso):
            return NotImplemented
        return self.ordem > other.ordem

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, NivelAcesso):
            return NotImplemented
        return self.ordem >= other.ordem


_HIERARQUIA: tuple[NivelAcesso, ...] = tuple(NivelAcesso)
