# gestao/domain/campos.py
"""Checagens de campo compartilhadas pelos cadastros. Funcoes puras."""
from __future__ import annotations

from collections.abc import Mapping

from email_validator import EmailNotValidError, validate_email

from .exceptions import ErroCampo

_TELEFONE_MIN_DIGITOS = 10


def email_valido(valor: object) -> bool:
    """Sintaxe apenas; sem consulta DNS."""
    if not isinstance(valor, str):
        return False
    try:
        validate_email(valor.strip(), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def telefone_valido(valor: object) -> bool:
    if not isinstance(valor, str):
        return False
    return sum(c in "0123456789" for c in valor) >= _TELEFONE_MIN_DIGITOS


def texto_preenchido(valor: object) -> bool:
    return isinstance(valor, str) and bool(valor.strip())


class Checagem:
    """Acumula ErroCampo para um rascunho. Em modo parcial so checa o que veio."""

    def __init__(self, dados: Mapping[str, object], *, parcial: bool) -> None:
        self._dados = dados
        self._parcial = parcial
        self.erros: list[ErroCampo] = []

    def exigir(self, campo: str, ok: bool, mensagem: str) -> None:
        if campo not in self._dados:
            if not self._parcial:
                self.erros.append(ErroCampo(campo, "Campo obrigatorio"))
            return
        if not ok:
            self.erros.append(ErroCampo(campo, mensagem))

    def opcional(self, campo: str, ok: bool, mensagem: str) -> None:
        if campo in self._dados and not ok:
            self.erros.append(ErroCampo(campo, mensagem))
