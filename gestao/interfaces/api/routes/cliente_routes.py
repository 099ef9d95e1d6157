# gestao/interfaces/api/routes/cliente_routes.py
from fastapi import APIRouter, Depends, Response

from gestao.application.dtos.cliente_dto import ClienteCreateDTO, ClienteDTO, ClienteUpdateDTO
from gestao.application.services.cliente_service import ClienteService
from gestao.application.services.export_service import ExportService
from gestao.interfaces.api.dependencies import get_cliente_service, get_export_service

router = APIRouter()


@router.get("/customers", response_model=list[ClienteDTO])
def listar_clientes(
    service: ClienteService = Depends(get_cliente_service),  # noqa: B008
) -> list[ClienteDTO]:
    return service.listar()


# export ANTES de /customers/{cliente_id} (path conflict)
@router.get("/customers/export")
def exportar_clientes(
    service: ClienteService = Depends(get_cliente_service),  # noqa: B008
    export_service: ExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    return Response(
        content=export_service.exportar_clientes(service.listar()),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=customers.csv"},
    )


@router.get("/customers/{cliente_id}", response_model=ClienteDTO)
def obter_cliente(
    cliente_id: int,
    service: ClienteService = Depends(get_cliente_service),  # noqa: B008
) -> ClienteDTO:
    return service.obter(cliente_id)


@router.post("/customers", response_model=ClienteDTO, status_code=201)
def criar_cliente(
    body: ClienteCreateDTO,
    service: ClienteService = Depends(get_cliente_service),  # noqa: B008
) -> ClienteDTO:
    return service.criar(body)


@router.put("/customers/{cliente_id}", response_model=ClienteDTO)
def atualizar_cliente(
    cliente_id: int,
    body: ClienteUpdateDTO,
    service: ClienteService = Depends(get_cliente_service),  # noqa: B008
) -> ClienteDTO:
    return service.atualizar(cliente_id, body)


@router.delete("/customers/{cliente_id}", status_code=204)
def remover_cliente(
    cliente_id: int,
    service: ClienteService = Depends(get_cliente_service),  # noqa: B008
) -> Response:
    service.remover(cliente_id)
    return Response(status_code=204)
