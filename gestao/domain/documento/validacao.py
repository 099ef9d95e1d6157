# gestao/domain/documento/validacao.py
#
# Check-digit validation for Brazilian taxpayer documents (CPF and CNPJ).
#
# Design decisions:
#   - Pure functions, zero IO. Every public function returns a bool and never
#     raises: malformed input (wrong length, letters only, None) is just False.
#   - Input is cleaned by stripping every non-digit character, so formatted
#     ("111.444.777-35") and raw ("11144477735") inputs are equivalent.
#   - Sequences of one repeated digit pass the mod-11 arithmetic but are
#     rejected explicitly, matching Receita Federal rules.
from __future__ import annotations

from enum import Enum

_DIGITOS = frozenset("0123456789")
_PESOS_CPF_1 = [10, 9, 8, 7, 6, 5, 4, 3, 2]
_PESOS_CPF_2 = [11, 10, 9, 8, 7, 6, 5, 4, 3, 2]
_PESOS_CNPJ_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
_PESOS_CNPJ_2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]


class TipoDocumento(str, Enum):
    CPF = "CPF"
    CNPJ = "CNPJ"


def limpar_documento(raw: object) -> str:
    """Remove tudo que nao for digito. Entrada que nao e texto vira string vazia."""
    if not isinstance(raw, str):
        return ""
    return "".join(c for c in raw if c in _DIGITOS)


def _digito_verificador(digitos: str, pesos: list[int]) -> int:
    soma = sum(int(d) * p for d, p in zip(digitos, pesos))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def _verificar_cpf(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CPF (11 digitos limpos)."""
    if int(digitos[9]) != _digito_verificador(digitos[:9], _PESOS_CPF_1):
        return False
    return int(digitos[10]) == _digito_verificador(digitos[:10], _PESOS_CPF_2)


def _verificar_cnpj(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CNPJ (14 digitos limpos)."""
    if int(digitos[12]) != _digito_verificador(digitos[:12], _PESOS_CNPJ_1):
        return False
    return int(digitos[13]) == _digito_verificador(digitos[:13], _PESOS_CNPJ_2)


def _todos_iguais(digitos: str) -> bool:
    return len(set(digitos)) == 1


def cpf_valido(raw: object) -> bool:
    digitos = limpar_documento(raw)
    if len(digitos) != 11 or _todos_iguais(digitos):
        return False
    return _verificar_cpf(digitos)


def cnpj_valido(raw: object) -> bool:
    digitos = limpar_documento(raw)
    if len(digitos) != 14 or _todos_iguais(digitos):
        return False
    return _verificar_cnpj(digitos)


def documento_valido(raw: object) -> bool:
    """True se o texto limpo for um CPF ou um CNPJ valido."""
    return cpf_valido(raw) or cnpj_valido(raw)


def identificar_documento(raw: object) -> TipoDocumento | None:
    if cpf_valido(raw):
        return TipoDocumento.CPF
    if cnpj_valido(raw):
        return TipoDocumento.CNPJ
    return None
