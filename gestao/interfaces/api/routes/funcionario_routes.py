# gestao/interfaces/api/routes/funcionario_routes.py
#
# X-Actor-Id identifica o funcionario que executa a mutacao. Obrigatorio para
# DELETE (ausente = 403); em POST/PUT, quando enviado, passa pelo controle de acesso.
from fastapi import APIRouter, Depends, Header, Response

from gestao.application.dtos.funcionario_dto import FuncionarioCreateDTO, FuncionarioDTO, FuncionarioUpdateDTO
from gestao.application.services.export_service import ExportService
from gestao.application.services.funcionario_service import FuncionarioService
from gestao.interfaces.api.dependencies import get_export_service, get_funcionario_service

router = APIRouter()


@router.get("/employees", response_model=list[FuncionarioDTO])
def listar_funcionarios(
    service: FuncionarioService = Depends(get_funcionario_service),  # noqa: B008
) -> list[FuncionarioDTO]:
    return service.listar()


@router.get("/employees/export")
def exportar_funcionarios(
    service: FuncionarioService = Depends(get_funcionario_service),  # noqa: B008
    export_service: ExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    return Response(
        content=export_service.exportar_csv(FuncionarioDTO, service.listar()),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=employees.csv"},
    )


@router.get("/employees/{funcionario_id}", response_model=FuncionarioDTO)
def obter_funcionario(
    funcionario_id: int,
    service: FuncionarioService = Depends(get_funcionario_service),  # noqa: B008
) -> FuncionarioDTO:
    return service.obter(funcionario_id)


@router.post("/employees", response_model=FuncionarioDTO, status_code=201)
def criar_funcionario(
    body: FuncionarioCreateDTO,
    ator_id: int | None = Header(default=None, alias="X-Actor-Id"),
    service: FuncionarioService = Depends(get_funcionario_service),  # noqa: B008
) -> FuncionarioDTO:
    return service.criar(body, ator_id=ator_id)


@router.put("/employees/{funcionario_id}", response_model=FuncionarioDTO)
def atualizar_funcionario(
    funcionario_id: int,
    body: FuncionarioUpdateDTO,
    ator_id: int | None = Header(default=None, alias="X-Actor-Id"),
    service: FuncionarioService = Depends(get_funcionario_service),  # noqa: B008
) -> FuncionarioDTO:
    return service.atualizar(funcionario_id, body, ator_id=ator_id)


@router.delete("/employees/{funcionario_id}", status_code=204)
def remover_funcionario(
    funcionario_id: int,
    ator_id: int | None = Header(default=None, alias="X-Actor-Id"),
    service: FuncionarioService = Depends(get_funcionario_service),  # noqa: B008
) -> Response:
    service.remover(funcionario_id, ator_id=ator_id)
    return Response(status_code=204)
