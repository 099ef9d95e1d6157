# gestao/domain/exceptions.py
"""Hierarquia de erros do dominio. Nenhum deles e fatal: cada um fica restrito
a operacao que o produziu e vira uma resposta HTTP distinta na borda."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


class GestaoError(Exception):
    """Base de todos os erros do dominio."""


@dataclass(frozen=True)
class ErroCampo:
    campo: str
    mensagem: str


class ValidacaoError(GestaoError):
    """Campos malformados ou documento que falha em CPF e CNPJ."""

    def __init__(self, erros: list[ErroCampo]) -> None:
        self.erros = list(erros)
        campos = ", ".join(e.campo for e in self.erros)
        super().__init__(f"Dados invalidos: {campos}")

    def renomear(self, nomes: Mapping[str, str]) -> ValidacaoError:
        """Copia com os campos traduzidos (ex: nome -> name) para a borda da API."""
        return ValidacaoError([
            ErroCampo(campo=nomes.get(e.campo, e.campo), mensagem=e.mensagem)
            for e in self.erros
        ])


class NaoEncontradoError(GestaoError):
    def __init__(self, tipo: str, entidade_id: int) -> None:
        self.tipo = tipo
        self.entidade_id = entidade_id
        super().__init__(f"{tipo} {entidade_id} nao encontrado")


class AutorizacaoError(GestaoError):
    """Negacao do controle de acesso. Distinta de dado invalido ou inexistente."""
