# gestao/domain/funcionario/acesso.py
"""Controle de acesso por hierarquia. Funcao pura, zero IO.

Depende so do nivel do ator e do tipo de acao; nao existe excecao por recurso.
admin nao tem bypass proprio: e apenas o topo da hierarquia.
"""
from __future__ import annotations

from enum import Enum

from gestao.domain.exceptions import AutorizacaoError

from .enums import NivelAcesso


class Acao(str, Enum):
    CRIAR = "create"
    EDITAR = "edit"
    EXCLUIR = "delete"


_NIVEL_MINIMO: dict[Acao, NivelAcesso] = {
    Acao.CRIAR: NivelAcesso.SUPERVISOR,
    Acao.EDITAR: NivelAcesso.SUPERVISOR,
    Acao.EXCLUIR: NivelAcesso.GERENTE,
}


def pode_executar(papel: NivelAcesso | str, acao: Acao | str) -> bool:
    """Nivel ou acao desconhecidos sao sempre negados."""
    try:
        nivel = NivelAcesso(papel)
        acao = Acao(acao)
    except ValueError:
        return False
    return nivel >= _NIVEL_MINIMO[acao]


def exigir_permissao(papel: NivelAcesso | str, acao: Acao | str) -> None:
    if not pode_executar(papel, acao):
        nivel = papel.value if isinstance(papel, NivelAcesso) else papel
        nome_acao = acao.value if isinstance(acao, Acao) else acao
        raise AutorizacaoError(f"Nivel '{nivel}' nao pode executar '{nome_acao}' em funcionarios")
