import dataclasses

import pytest

from gestao.domain.documento.value_objects import CNPJ, CPF, formatar_documento, mascarar_documento


def test_cpf_valido_formatado():
    cpf = CPF("111.444.777-35")
    assert cpf.valor == "11144477735"
    assert cpf.formatado == "111.444.777-35"


def test_cpf_digito_verificador_invalido():
    with pytest.raises(ValueError, match="CPF invalido"):
        CPF("111.444.777-00")


def test_cpf_todos_iguais_invalido():
    with pytest.raises(ValueError):
        CPF("111.111.111-11")


def test_cpf_comprimento_errado():
    with pytest.raises(ValueError, match="comprimento 3"):
        CPF("123")


def test_cpf_repr_nunca_mostra_completo():
    """CPF nunca aparece completo em logs/repr (exigencia LGPD)."""
    cpf = CPF("11144477735")
    assert "11144477735" not in repr(cpf)
    assert "11144477735" not in str(cpf)
    assert str(cpf) == "***.444.777-**"


def test_cpf_igualdade_por_valor():
    a = CPF("11144477735")
    b = CPF("111.444.777-35")
    assert a == b
    assert hash(a) == hash(b)


def test_cnpj_valido_sem_formatacao():
    cnpj = CNPJ("11222333000181")
    assert cnpj.formatado == "11.222.333/0001-81"


def test_cnpj_digitos_verificadores_invalidos():
    with pytest.raises(ValueError, match="CNPJ invalido"):
        CNPJ("11.222.333/0001-99")


def test_cnpj_imutavel():
    cnpj = CNPJ("11222333000181")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cnpj._valor = "outro"  # type: ignore[misc]


def test_cnpj_desigualdade():
    assert CNPJ("11222333000181") != CNPJ("33000167000101")


def test_formatar_documento():
    assert formatar_documento("11144477735") == "111.444.777-35"
    assert formatar_documento("11222333000181") == "11.222.333/0001-81"
    assert formatar_documento("lixo") == "lixo"


def test_mascarar_documento():
    assert mascarar_documento("11144477735") == "***.444.777-**"
    assert mascarar_documento("11222333000181") == "11.222.333/0001-81"
    assert mascarar_documento("123") == "***"


def test_cnpj_comprimento_errado():
    with pytest.raises(ValueError, match="CNPJ invalido: comprimento 11, esperado 14"):
        CNPJ("11144477735")


def test_documentos_em_conjunto_deduplicam_por_valor():
    docs = {CPF("11144477735"), CPF("111.444.777-35"), CNPJ("11.222.333/0001-81"), CNPJ("11222333000181")}
    assert len(docs) == 2
