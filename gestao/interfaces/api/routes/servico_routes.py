# gestao/interfaces/api/routes/servico_routes.py
from fastapi import APIRouter, Depends, Response

from gestao.application.dtos.servico_dto import ServicoCreateDTO, ServicoDTO, ServicoUpdateDTO
from gestao.application.services.export_service import ExportService
from gestao.application.services.servico_service import ServicoService
from gestao.interfaces.api.dependencies import get_export_service, get_servico_service

router = APIRouter()


@router.get("/services", response_model=list[ServicoDTO])
def listar_servicos(
    service: ServicoService = Depends(get_servico_service),  # noqa: B008
) -> list[ServicoDTO]:
    return service.listar()


@router.get("/services/export")
def exportar_servicos(
    service: ServicoService = Depends(get_servico_service),  # noqa: B008
    export_service: ExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    return Response(
        content=export_service.exportar_csv(ServicoDTO, service.listar()),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=services.csv"},
    )


@router.get("/services/{servico_id}", response_model=ServicoDTO)
def obter_servico(
    servico_id: int,
    service: ServicoService = Depends(get_servico_service),  # noqa: B008
) -> ServicoDTO:
    return service.obter(servico_id)


@router.post("/services", response_model=ServicoDTO, status_code=201)
def criar_servico(
    body: ServicoCreateDTO,
    service: ServicoService = Depends(get_servico_service),  # noqa: B008
) -> ServicoDTO:
    return service.criar(body)


@router.put("/services/{servico_id}", response_model=ServicoDTO)
def atualizar_servico(
    servico_id: int,
    body: ServicoUpdateDTO,
    service: ServicoService = Depends(get_servico_service),  # noqa: B008
) -> ServicoDTO:
    return service.atualizar(servico_id, body)


@router.delete("/services/{servico_id}", status_code=204)
def remover_servico(
    servico_id: int,
    service: ServicoService = Depends(get_servico_service),  # noqa: B008
) -> Response:
    service.remover(servico_id)
    return Response(status_code=204)
