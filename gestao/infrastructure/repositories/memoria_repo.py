# gestao/infrastructure/repositories/memoria_repo.py
#
# Generic in-memory repository, one instance per entity kind.
#
# Design decisions:
#   - Entities are frozen dataclasses with `id` and `criado_em` as their first
#     fields. criar builds them with entidade(id=..., criado_em=..., **rascunho);
#     atualizar merges with dataclasses.replace, so unsupplied fields survive.
#   - `id` and `criado_em` are dropped from any rascunho/parcial: they belong to
#     the repository and never change after creation.
#   - The counter starts at 1 and only moves forward. A removed id is retired.
#   - FastAPI runs sync endpoints in a thread pool, so one Lock guards the
#     (counter, map) pair for the whole read-modify-write of each call.
#   - dict keeps insertion order, which is the listing order.
from __future__ import annotations

import dataclasses
import threading
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_CAMPOS_DO_REPOSITORIO = frozenset({"id", "criado_em"})


def _agora() -> datetime:
    return datetime.now(timezone.utc)


def _sem_campos_do_repositorio(dados: Mapping[str, object]) -> dict[str, Any]:
    return {k: v for k, v in dados.items() if k not in _CAMPOS_DO_REPOSITORIO}


class RepositorioEmMemoria(Generic[T]):
    def __init__(self, entidade: type[T], relogio: Callable[[], datetime] = _agora) -> None:
        self._entidade = entidade
        self._relogio = relogio
        self._registros: dict[int, T] = {}
        self._ultimo_id = 0
        self._lock = threading.Lock()

    def listar_todos(self) -> list[T]:
        with self._lock:
            return list(self._registros.values())

    def buscar_por_id(self, entidade_id: int) -> T | None:
        with self._lock:
            return self._registros.get(entidade_id)

    def contar(self) -> int:
        with self._lock:
            return len(self._registros)

    def criar(self, rascunho: Mapping[str, object]) -> T:
        dados = _sem_campos_do_repositorio(rascunho)
        with self._lock:
            novo_id = self._ultimo_id + 1
            # Construir antes de avancar o contador: rascunho invalido nao gasta id
            entidade = self._entidade(id=novo_id, criado_em=self._relogio(), **dados)  # type: ignore[call-arg]
            self._ultimo_id = novo_id
            self._registros[novo_id] = entidade
            return entidade

    def atualizar(self, entidade_id: int, parcial: Mapping[str, object]) -> T | None:
        dados = _sem_campos_do_repositorio(parcial)
        with self._lock:
            atual = self._registros.get(entidade_id)
            if atual is None:
                return None
            atualizado = dataclasses.replace(atual, **dados)  # type: ignore[type-var]
            self._registros[entidade_id] = atualizado
            return atualizado

    def remover(self, entidade_id: int) -> bool:
        with self._lock:
            return self._registros.pop(entidade_id, None) is not None
