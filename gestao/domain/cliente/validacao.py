# gestao/domain/cliente/validacao.py
"""Pre-condicoes de escrita de cliente. Rodam antes do repositorio ver o rascunho."""
from __future__ import annotations

from collections.abc import Mapping

from gestao.domain.campos import Checagem, email_valido, telefone_valido, texto_preenchido
from gestao.domain.documento.validacao import documento_valido, limpar_documento
from gestao.domain.exceptions import ValidacaoError


def validar_cliente(dados: Mapping[str, object], *, parcial: bool = False) -> ValidacaoError | None:
    """Retorna o erro estruturado (nao lanca). None = rascunho aceito."""
    checagem = Checagem(dados, parcial=parcial)
    checagem.exigir("nome", texto_preenchido(dados.get("nome")), "Nome nao pode ser vazio")
    checagem.exigir("documento", documento_valido(dados.get("documento")), "CPF/CNPJ invalido")
    checagem.exigir("email", email_valido(dados.get("email")), "E-mail invalido")
    checagem.exigir("telefone", telefone_valido(dados.get("telefone")), "Telefone deve ter ao menos 10 digitos")
    return ValidacaoError(checagem.erros) if checagem.erros else None


def normalizar_cliente(dados: Mapping[str, object]) -> dict[str, object]:
    """Forma canonica: documento so com digitos, textos sem espacos nas pontas."""
    normalizado = {k: v.strip() if isinstance(v, str) else v for k, v in dados.items()}
    if "documento" in normalizado:
        normalizado["documento"] = limpar_documento(normalizado["documento"])
    return normalizado
