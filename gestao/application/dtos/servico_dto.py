# gestao/application/dtos/servico_dto.py
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from gestao.domain.servico.entities import Servico


class ServicoDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    nome: str = Field(alias="name")
    descricao: str = Field(alias="description")
    tempo_estimado: int = Field(alias="estimatedTime")
    unidade_tempo: str = Field(alias="timeUnit")
    criado_em: datetime = Field(alias="createdAt")

    @classmethod
    def de_entidade(cls, s: Servico) -> ServicoDTO:
        return cls(
            id=s.id,
            nome=s.nome,
            descricao=s.descricao,
            tempo_estimado=s.tempo_estimado,
            unidade_tempo=s.unidade_tempo.value,
            criado_em=s.criado_em,
        )


class ServicoCreateDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nome: str = Field(alias="name")
    descricao: str = Field(alias="description")
    tempo_estimado: StrictInt = Field(alias="estimatedTime")
    unidade_tempo: str | None = Field(default=None, alias="timeUnit")


class ServicoUpdateDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nome: str | None = Field(default=None, alias="name")
    descricao: str | None = Field(default=None, alias="description")
    tempo_estimado: StrictInt | None = Field(default=None, alias="estimatedTime")
    unidade_tempo: str | None = Field(default=None, alias="timeUnit")
