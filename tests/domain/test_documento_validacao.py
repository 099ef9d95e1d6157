import pytest

from gestao.domain.documento.validacao import (
    TipoDocumento,
    cnpj_valido,
    cpf_valido,
    documento_valido,
    identificar_documento,
    limpar_documento,
)


@pytest.mark.parametrize("digito", "0123456789")
def test_cpf_todos_digitos_iguais_invalido(digito):
    assert not cpf_valido(digito * 11)


def test_cpf_valido_sem_formatacao():
    assert cpf_valido("11144477735")


def test_cpf_valido_formatado():
    assert cpf_valido("111.444.777-35")
    assert cpf_valido("529.982.247-25")


def test_cpf_um_digito_alterado_invalida():
    """Perturbar o ultimo digito derruba a validacao."""
    assert not cpf_valido("11144477736")


def test_cpf_primeiro_digito_verificador_errado():
    assert not cpf_valido("11144477705")


def test_cpf_comprimento_errado():
    assert not cpf_valido("1114447773")
    assert not cpf_valido("111444777350")
    assert not cpf_valido("")


def test_cnpj_valido():
    assert cnpj_valido("11222333000181")
    assert cnpj_valido("11.222.333/0001-81")
    assert cnpj_valido("33.000.167/0001-01")


def test_cnpj_digitos_verificadores_invalidos():
    assert not cnpj_valido("11.222.333/0001-99")
    assert not cnpj_valido("11222333000182")


def test_cnpj_todos_iguais_invalido():
    assert not cnpj_valido("00.000.000/0000-00")
    assert not cnpj_valido("11111111111111")


@pytest.mark.parametrize("tamanho", [n for n in range(21) if n != 14])
def test_cnpj_rejeita_comprimento_diferente_de_14(tamanho):
    entrada = ("11222333000181" * 2)[:tamanho]
    assert not cnpj_valido(entrada)


@pytest.mark.parametrize("entrada", [None, 11144477735, ["11144477735"], "abc", "   ", "¹¹¹⁴⁴⁴⁷⁷⁷³⁵"])
def test_entrada_malformada_nunca_lanca(entrada):
    assert not cpf_valido(entrada)
    assert not cnpj_valido(entrada)
    assert not documento_valido(entrada)


def test_documento_valido_aceita_cpf_ou_cnpj():
    assert documento_valido("111.444.777-35")
    assert documento_valido("11.222.333/0001-81")
    assert not documento_valido("11144477736")
    assert not documento_valido("11222333000182")


def test_identificar_documento():
    assert identificar_documento("11144477735") is TipoDocumento.CPF
    assert identificar_documento("11222333000181") is TipoDocumento.CNPJ
    assert identificar_documento("123") is None


def test_limpar_documento():
    assert limpar_documento("11.222.333/0001-81") == "11222333000181"
    assert limpar_documento(None) == ""
