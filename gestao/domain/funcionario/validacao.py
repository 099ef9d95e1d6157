# gestao/domain/funcionario/validacao.py
from __future__ import annotations

from collections.abc import Mapping

from gestao.domain.campos import Checagem, email_valido, telefone_valido, texto_preenchido
from gestao.domain.exceptions import ValidacaoError

from .enums import NivelAcesso, StatusFuncionario

_PAPEIS = {n.value for n in NivelAcesso}
_STATUS = {s.value for s in StatusFuncionario}


def validar_funcionario(dados: Mapping[str, object], *, parcial: bool = False) -> ValidacaoError | None:
    checagem = Checagem(dados, parcial=parcial)
    checagem.exigir("nome", texto_preenchido(dados.get("nome")), "Nome nao pode ser vazio")
    checagem.exigir("cargo", isinstance(dados.get("cargo"), str), "Cargo deve ser texto")
    checagem.exigir("email", email_valido(dados.get("email")), "E-mail invalido")
    checagem.exigir("telefone", telefone_valido(dados.get("telefone")), "Telefone deve ter ao menos 10 digitos")
    checagem.opcional(
        "papel", dados.get("papel") in _PAPEIS, f"Nivel de acesso deve ser um de {sorted(_PAPEIS)}",
    )
    checagem.opcional("status", dados.get("status") in _STATUS, "Status deve ser active ou inactive")
    return ValidacaoError(checagem.erros) if checagem.erros else None


def normalizar_funcionario(dados: Mapping[str, object]) -> dict[str, object]:
    normalizado = {k: v.strip() if isinstance(v, str) else v for k, v in dados.items()}
    if "papel" in normalizado:
        normalizado["papel"] = NivelAcesso(normalizado["papel"])
    if "status" in normalizado:
        normalizado["status"] = StatusFuncionario(normalizado["status"])
    return normalizado
