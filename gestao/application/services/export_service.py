# gestao/application/services/export_service.py
from __future__ import annotations

import csv
import io
from collections.abc import Sequence

from pydantic import BaseModel

from gestao.domain.documento.value_objects import formatar_documento

from ..dtos.cliente_dto import ClienteDTO


class ExportService:
    def exportar_csv(self, modelo: type[BaseModel], registros: Sequence[BaseModel]) -> str:
        """Cabecalho com os nomes do JSON, uma linha por registro."""
        colunas = [campo.alias or nome for nome, campo in modelo.model_fields.items()]
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(colunas)
        for r in registros:
            linha = r.model_dump(mode="json", by_alias=True)
            writer.writerow([linha[c] for c in colunas])
        return output.getvalue()

    def exportar_clientes(self, clientes: Sequence[ClienteDTO]) -> str:
        formatados = [c.model_copy(update={"documento": formatar_documento(c.documento)}) for c in clientes]
        return self.exportar_csv(ClienteDTO, formatados)
