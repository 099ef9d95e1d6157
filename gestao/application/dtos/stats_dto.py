# gestao/application/dtos/stats_dto.py
from pydantic import BaseModel


class StatsDTO(BaseModel):
    customers: int
    employees: int
    services: int
