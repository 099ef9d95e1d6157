# gestao/application/services/cliente_service.py
from __future__ import annotations

from collections.abc import Mapping

from gestao.domain.cliente.entities import Cliente
from gestao.domain.cliente.validacao import normalizar_cliente, validar_cliente
from gestao.domain.documento.value_objects import mascarar_documento
from gestao.domain.exceptions import ValidacaoError

from ..dtos.cliente_dto import ClienteDTO
from .cadastro_service import CadastroService


class ClienteService(CadastroService[Cliente, ClienteDTO]):
    tipo = "Cliente"

    def _validar(self, dados: Mapping[str, object], *, parcial: bool) -> ValidacaoError | None:
        return validar_cliente(dados, parcial=parcial)

    def _normalizar(self, dados: Mapping[str, object]) -> dict[str, object]:
        return normalizar_cliente(dados)

    def _para_dto(self, entidade: Cliente) -> ClienteDTO:
        return ClienteDTO.de_entidade(entidade)

    def _descrever(self, entidade: Cliente) -> str:
        return f"Cliente {entidade.id} ({mascarar_documento(entidade.documento)})"
