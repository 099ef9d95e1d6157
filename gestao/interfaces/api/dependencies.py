# gestao/interfaces/api/dependencies.py
from fastapi import Depends, Request

from gestao.application.services.cliente_service import ClienteService
from gestao.application.services.export_service import ExportService
from gestao.application.services.funcionario_service import FuncionarioService
from gestao.application.services.servico_service import ServicoService
from gestao.application.services.stats_service import StatsService
from gestao.infrastructure.armazem import Armazem


def get_armazem(request: Request) -> Armazem:
    """O armazem e criado pela fabrica da app e vive em app.state."""
    return request.app.state.armazem  # type: ignore[no-any-return]


def get_cliente_service(armazem: Armazem = Depends(get_armazem)) -> ClienteService:  # noqa: B008
    return ClienteService(armazem.clientes)


def get_funcionario_service(armazem: Armazem = Depends(get_armazem)) -> FuncionarioService:  # noqa: B008
    return FuncionarioService(armazem.funcionarios)


def get_servico_service(armazem: Armazem = Depends(get_armazem)) -> ServicoService:  # noqa: B008
    return ServicoService(armazem.servicos)


def get_stats_service(armazem: Armazem = Depends(get_armazem)) -> StatsService:  # noqa: B008
    return StatsService(armazem.clientes, armazem.funcionarios, armazem.servicos)


def get_export_service() -> ExportService:
    return ExportService()
