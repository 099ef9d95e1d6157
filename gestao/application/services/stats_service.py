# gestao/application/services/stats_service.py
from __future__ import annotations

from gestao.domain.cliente.entities import Cliente
from gestao.domain.funcionario.entities import Funcionario
from gestao.domain.repository import Repositorio
from gestao.domain.servico.entities import Servico

from ..dtos.stats_dto import StatsDTO


class StatsService:
    """Leitura pura: contagens no momento da chamada, sem cache."""

    def __init__(
        self,
        clientes: Repositorio[Cliente],
        funcionarios: Repositorio[Funcionario],
        servicos: Repositorio[Servico],
    ) -> None:
        self._clientes = clientes
        self._funcionarios = funcionarios
        self._servicos = servicos

    def obter_stats(self) -> StatsDTO:
        return StatsDTO(
            customers=self._clientes.contar(),
            employees=self._funcionarios.contar(),
            services=self._servicos.contar(),
        )
