# gestao/domain/repository.py
from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class Repositorio(Protocol[T_co]):
    """Capacidades de um cadastro. Qualquer armazenamento (memoria hoje, banco
    amanha) que cumpra este contrato serve aos servicos sem mudar chamadores.

    Rascunhos chegam ja validados; o repositorio so reporta id inexistente
    (None em buscar/atualizar, False em remover).
    """

    def listar_todos(self) -> list[T_co]: ...
    def buscar_por_id(self, entidade_id: int) -> T_co | None: ...
    def criar(self, rascunho: Mapping[str, object]) -> T_co: ...
    def atualizar(self, entidade_id: int, parcial: Mapping[str, object]) -> T_co | None: ...
    def remover(self, entidade_id: int) -> bool: ...
    def contar(self) -> int: ...
