# gestao/application/dtos/cliente_dto.py
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from gestao.domain.cliente.entities import Cliente


class ClienteDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    nome: str = Field(alias="name")
    documento: str = Field(alias="document")
    email: str
    telefone: str = Field(alias="phone")
    criado_em: datetime = Field(alias="createdAt")

    @classmethod
    def de_entidade(cls, c: Cliente) -> ClienteDTO:
        return cls(
            id=c.id,
            nome=c.nome,
            documento=c.documento,
            email=c.email,
            telefone=c.telefone,
            criado_em=c.criado_em,
        )


class ClienteCreateDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nome: str = Field(alias="name")
    documento: str = Field(alias="document")
    email: str
    telefone: str = Field(alias="phone")


class ClienteUpdateDTO(BaseModel):
    """Merge parcial: so os campos enviados no corpo sao aplicados."""

    model_config = ConfigDict(populate_by_name=True)

    nome: str | None = Field(default=None, alias="name")
    documento: str | None = Field(default=None, alias="document")
    email: str | None = None
    telefone: str | None = Field(default=None, alias="phone")
