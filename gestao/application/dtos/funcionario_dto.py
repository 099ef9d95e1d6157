# gestao/application/dtos/funcionario_dto.py
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from gestao.domain.funcionario.entities import Funcionario


class FuncionarioDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    nome: str = Field(alias="name")
    cargo: str = Field(alias="position")
    email: str
    telefone: str = Field(alias="phone")
    status: str
    papel: str = Field(alias="role")
    criado_em: datetime = Field(alias="createdAt")

    @classmethod
    def de_entidade(cls, f: Funcionario) -> FuncionarioDTO:
        return cls(
            id=f.id,
            nome=f.nome,
            cargo=f.cargo,
            email=f.email,
            telefone=f.telefone,
            status=f.status.value,
            papel=f.papel.value,
            criado_em=f.criado_em,
        )


class FuncionarioCreateDTO(BaseModel):
    """role e status sao texto aqui; a checagem de dominio aponta valor fora da lista."""

    model_config = ConfigDict(populate_by_name=True)

    nome: str = Field(alias="name")
    cargo: str = Field(alias="position")
    email: str
    telefone: str = Field(alias="phone")
    status: str | None = None
    papel: str | None = Field(default=None, alias="role")


class FuncionarioUpdateDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nome: str | None = Field(default=None, alias="name")
    cargo: str | None = Field(default=None, alias="position")
    email: str | None = None
    telefone: str | None = Field(default=None, alias="phone")
    status: str | None = None
    papel: str | None = Field(default=None, alias="role")
