# gestao/domain/documento/value_objects.py
"""CPF e CNPJ ja validados, para formatacao na exportacao e mascara em logs."""
from __future__ import annotations

from dataclasses import dataclass

from .validacao import TipoDocumento, cnpj_valido, cpf_valido, identificar_documento, limpar_documento


@dataclass(frozen=True)
class _Documento:
    _valor: str

    _nome = ""
    _tamanho = 0
    _verificador = staticmethod(lambda digitos: False)

    def __post_init__(self) -> None:
        digitos = limpar_documento(self._valor)
        if len(digitos) != self._tamanho:
            raise ValueError(f"{self._nome} invalido: comprimento {len(digitos)}, esperado {self._tamanho}")
        if not self._verificador(digitos):
            raise ValueError(f"{self._nome} invalido: digitos verificadores incorretos ou repetidos")
        object.__setattr__(self, "_valor", digitos)

    @property
    def valor(self) -> str:
        """So digitos. Nao logar quando for CPF."""
        return self._valor


@dataclass(frozen=True)
class CPF(_Documento):
    _nome = "CPF"
    _tamanho = 11
    _verificador = staticmethod(cpf_valido)

    @property
    def formatado(self) -> str:
        d = self._valor
        return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"

    @property
    def mascarado(self) -> str:
        d = self._valor
        return f"***.{d[3:6]}.{d[6:9]}-**"

    # LGPD: repr e str so mostram a versao mascarada
    def __repr__(self) -> str:
        return f"CPF({self.mascarado!r})"

    def __str__(self) -> str:
        return self.mascarado


@dataclass(frozen=True)
class CNPJ(_Documento):
    _nome = "CNPJ"
    _tamanho = 14
    _verificador = staticmethod(cnpj_valido)

    @property
    def formatado(self) -> str:
        d = self._valor
        return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"


def formatar_documento(raw: str) -> str:
    """Formata CPF/CNPJ valido; qualquer outra coisa volta como veio."""
    tipo = identificar_documento(raw)
    if tipo is TipoDocumento.CPF:
        return CPF(raw).formatado
    if tipo is TipoDocumento.CNPJ:
        return CNPJ(raw).formatado
    return raw


def mascarar_documento(raw: str) -> str:
    """Versao segura para logs. CNPJ e publico, CPF nunca aparece inteiro."""
    tipo = identificar_documento(raw)
    if tipo is TipoDocumento.CPF:
        return CPF(raw).mascarado
    if tipo is TipoDocumento.CNPJ:
        return CNPJ(raw).formatado
    return "***"
