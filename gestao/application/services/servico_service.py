# gestao/application/services/servico_service.py
from __future__ import annotations

from collections.abc import Mapping

from gestao.domain.exceptions import ValidacaoError
from gestao.domain.servico.entities import Servico
from gestao.domain.servico.validacao import normalizar_servico, validar_servico

from ..dtos.servico_dto import ServicoDTO
from .cadastro_service import CadastroService


class ServicoService(CadastroService[Servico, ServicoDTO]):
    tipo = "Servico"

    def _validar(self, dados: Mapping[str, object], *, parcial: bool) -> ValidacaoError | None:
        return validar_servico(dados, parcial=parcial)

    def _normalizar(self, dados: Mapping[str, object]) -> dict[str, object]:
        return normalizar_servico(dados)

    def _para_dto(self, entidade: Servico) -> ServicoDTO:
        return ServicoDTO.de_entidade(entidade)
