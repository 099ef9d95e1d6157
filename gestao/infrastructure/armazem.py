# gestao/infrastructure/armazem.py
from __future__ import annotations

from dataclasses import dataclass

from gestao.domain.cliente.entities import Cliente
from gestao.domain.funcionario.entities import Funcionario
from gestao.domain.servico.entities import Servico

from .repositories.memoria_repo import RepositorioEmMemoria


@dataclass(frozen=True)
class Armazem:
    """Os tres cadastros de uma instancia da aplicacao. Sem singleton global:
    quem precisa recebe a referencia (app.state na API, fixture nos testes)."""

    clientes: RepositorioEmMemoria[Cliente]
    funcionarios: RepositorioEmMemoria[Funcionario]
    servicos: RepositorioEmMemoria[Servico]


def criar_armazem() -> Armazem:
    """Estado vazio. Nada persiste entre reinicios do processo."""
    return Armazem(
        clientes=RepositorioEmMemoria(Cliente),
        funcionarios=RepositorioEmMemoria(Funcionario),
        servicos=RepositorioEmMemoria(Servico),
    )
