# gestao/application/services/cadastro_service.py
"""Orquestracao comum dos cadastros: pre-condicao -> repositorio -> DTO.

Cada cadastro concreto informa como validar, normalizar e converter a
entidade; a sequencia de chamadas e a traducao de erros ficam aqui.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Generic, TypeVar

from pydantic import BaseModel

from gestao.domain.exceptions import NaoEncontradoError, ValidacaoError
from gestao.domain.repository import Repositorio

E = TypeVar("E")
D = TypeVar("D", bound=BaseModel)

logger = logging.getLogger(__name__)


def nomes_api(modelo: type[BaseModel]) -> dict[str, str]:
    """Atributo Python -> nome do campo no JSON (ex: telefone -> phone)."""
    return {nome: campo.alias or nome for nome, campo in modelo.model_fields.items()}


class CadastroService(Generic[E, D]):
    tipo: str = "Registro"

    def __init__(self, repo: Repositorio[E]) -> None:
        self._repo = repo

    # --- ganchos de cada cadastro ---

    def _validar(self, dados: Mapping[str, object], *, parcial: bool) -> ValidacaoError | None:
        raise NotImplementedError

    def _normalizar(self, dados: Mapping[str, object]) -> dict[str, object]:
        raise NotImplementedError

    def _para_dto(self, entidade: E) -> D:
        raise NotImplementedError

    def _descrever(self, entidade: E) -> str:
        return f"{self.tipo} {entidade.id}"  # type: ignore[attr-defined]

    # --- operacoes ---

    def listar(self) -> list[D]:
        return [self._para_dto(e) for e in self._repo.listar_todos()]

    def obter(self, entidade_id: int) -> D:
        entidade = self._repo.buscar_por_id(entidade_id)
        if entidade is None:
            raise NaoEncontradoError(self.tipo, entidade_id)
        return self._para_dto(entidade)

    def criar(self, entrada: BaseModel) -> D:
        dados = self._preparar(entrada, parcial=False)
        entidade = self._repo.criar(dados)
        logger.info("%s criado", self._descrever(entidade))
        return self._para_dto(entidade)

    def atualizar(self, entidade_id: int, entrada: BaseModel) -> D:
        dados = self._preparar(entrada, parcial=True)
        entidade = self._repo.atualizar(entidade_id, dados)
        if entidade is None:
            raise NaoEncontradoError(self.tipo, entidade_id)
        logger.info("%s atualizado: campos %s", self._descrever(entidade), sorted(dados))
        return self._para_dto(entidade)

    def remover(self, entidade_id: int) -> None:
        if not self._repo.remover(entidade_id):
            raise NaoEncontradoError(self.tipo, entidade_id)
        logger.info("%s %d removido", self.tipo, entidade_id)

    def _preparar(self, entrada: BaseModel, *, parcial: bool) -> dict[str, object]:
        dados = entrada.model_dump(exclude_unset=True)
        erro = self._validar(dados, parcial=parcial)
        if erro is not None:
            raise erro.renomear(nomes_api(type(entrada)))
        return self._normalizar(dados)
