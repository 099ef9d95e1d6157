# gestao/domain/servico/validacao.py
from __future__ import annotations

from collections.abc import Mapping

from gestao.domain.campos import Checagem, texto_preenchido
from gestao.domain.exceptions import ValidacaoError

from .enums import UnidadeTempo

_UNIDADES = {u.value for u in UnidadeTempo}


def _inteiro_positivo(valor: object) -> bool:
    # bool e subclasse de int; True nao e um tempo estimado
    return isinstance(valor, int) and not isinstance(valor, bool) and valor > 0


def validar_servico(dados: Mapping[str, object], *, parcial: bool = False) -> ValidacaoError | None:
    checagem = Checagem(dados, parcial=parcial)
    checagem.exigir("nome", texto_preenchido(dados.get("nome")), "Nome nao pode ser vazio")
    checagem.exigir("descricao", isinstance(dados.get("descricao"), str), "Descricao deve ser texto")
    checagem.exigir(
        "tempo_estimado", _inteiro_positivo(dados.get("tempo_estimado")), "Tempo estimado deve ser inteiro positivo",
    )
    checagem.opcional(
        "unidade_tempo", dados.get("unidade_tempo") in _UNIDADES, "Unidade deve ser hours, days ou weeks",
    )
    return ValidacaoError(checagem.erros) if checagem.erros else None


def normalizar_servico(dados: Mapping[str, object]) -> dict[str, object]:
    normalizado = {k: v.strip() if isinstance(v, str) else v for k, v in dados.items()}
    if "unidade_tempo" in normalizado:
        normalizado["unidade_tempo"] = UnidadeTempo(normalizado["unidade_tempo"])
    return normalizado
