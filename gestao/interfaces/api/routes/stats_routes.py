# gestao/interfaces/api/routes/stats_routes.py
from fastapi import APIRouter, Depends

from gestao.application.dtos.stats_dto import StatsDTO
from gestao.application.services.stats_service import StatsService
from gestao.interfaces.api.dependencies import get_stats_service

router = APIRouter()


@router.get("/stats", response_model=StatsDTO)
def get_stats(
    service: StatsService = Depends(get_stats_service),  # noqa: B008
) -> StatsDTO:
    return service.obter_stats()


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
