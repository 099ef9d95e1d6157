# gestao/application/services/funcionario_service.py
"""Cadastro de funcionarios com controle de acesso nas mutacoes.

O ator e outro funcionario, identificado pelo id. Remocao exige ator; criacao
e edicao so passam pelo controle quando um ator e informado (o primeiro
funcionario precisa ser cadastrado sem ninguem acima dele).
"""
from __future__ import annotations

import logging
from collections.abc import Mapping

from pydantic import BaseModel

from gestao.domain.exceptions import AutorizacaoError, ValidacaoError
from gestao.domain.funcionario.acesso import Acao, exigir_permissao, pode_executar
from gestao.domain.funcionario.entities import Funcionario
from gestao.domain.funcionario.validacao import normalizar_funcionario, validar_funcionario

from ..dtos.funcionario_dto import FuncionarioDTO
from .cadastro_service import CadastroService

logger = logging.getLogger(__name__)


class FuncionarioService(CadastroService[Funcionario, FuncionarioDTO]):
    tipo = "Funcionario"

    def _validar(self, dados: Mapping[str, object], *, parcial: bool) -> ValidacaoError | None:
        return validar_funcionario(dados, parcial=parcial)

    def _normalizar(self, dados: Mapping[str, object]) -> dict[str, object]:
        return normalizar_funcionario(dados)

    def _para_dto(self, entidade: Funcionario) -> FuncionarioDTO:
        return FuncionarioDTO.de_entidade(entidade)

    def criar(self, entrada: BaseModel, ator_id: int | None = None) -> FuncionarioDTO:
        if ator_id is not None:
            self.autorizar(ator_id, Acao.CRIAR)
        return super().criar(entrada)

    def atualizar(self, entidade_id: int, entrada: BaseModel, ator_id: int | None = None) -> FuncionarioDTO:
        if ator_id is not None:
            self.autorizar(ator_id, Acao.EDITAR)
        return super().atualizar(entidade_id, entrada)

    def remover(self, entidade_id: int, ator_id: int | None = None) -> None:
        if ator_id is None:
            logger.warning("Remocao do funcionario %d negada: ator nao identificado", entidade_id)
            raise AutorizacaoError("Remocao de funcionario exige ator identificado")
        self.autorizar(ator_id, Acao.EXCLUIR)
        super().remover(entidade_id)

    def autorizar(self, ator_id: int, acao: Acao) -> Funcionario:
        """Resolve o ator pelo id e aplica a hierarquia. Ator inexistente e negado."""
        ator = self._repo.buscar_por_id(ator_id)
        if ator is None:
            logger.warning("Acao '%s' negada: ator %d nao encontrado", acao.value, ator_id)
            raise AutorizacaoError(f"Ator {ator_id} nao encontrado")
        if not pode_executar(ator.papel, acao):
            logger.warning(
                "Acao '%s' negada ao funcionario %d (nivel %s)", acao.value, ator.id, ator.papel.value,
            )
        exigir_permissao(ator.papel, acao)
        return ator
