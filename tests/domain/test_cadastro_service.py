import pytest

from gestao.application.dtos.cliente_dto import ClienteCreateDTO, ClienteUpdateDTO
from gestao.application.dtos.servico_dto import ServicoCreateDTO
from gestao.application.services.cliente_service import ClienteService
from gestao.application.services.servico_service import ServicoService
from gestao.domain.exceptions import NaoEncontradoError, ValidacaoError


def _novo_cliente(**kwargs) -> ClienteCreateDTO:
    dados = {
        "name": "Maria Souza",
        "document": "111.444.777-35",
        "email": "maria@example.com",
        "phone": "11987654321",
    }
    dados.update(kwargs)
    return ClienteCreateDTO(**dados)


def test_criar_cliente_armazena_documento_canonico(armazem):
    service = ClienteService(armazem.clientes)
    dto = service.criar(_novo_cliente())
    assert dto.id == 1
    assert dto.documento == "11144477735"
    assert armazem.clientes.buscar_por_id(1).documento == "11144477735"


def test_criar_cliente_invalido_nao_toca_repositorio(armazem):
    service = ClienteService(armazem.clientes)
    with pytest.raises(ValidacaoError) as exc_info:
        service.criar(_novo_cliente(document="11144477736"))
    # erro traduzido para o nome do campo no JSON
    assert [e.campo for e in exc_info.value.erros] == ["document"]
    assert armazem.clientes.contar() == 0


def test_atualizar_cliente_merge_parcial(armazem):
    service = ClienteService(armazem.clientes)
    criado = service.criar(_novo_cliente())
    atualizado = service.atualizar(criado.id, ClienteUpdateDTO(phone="11911112222"))
    assert atualizado.telefone == "11911112222"
    assert atualizado.nome == criado.nome
    assert atualizado.documento == criado.documento
    assert atualizado.criado_em == criado.criado_em


def test_atualizar_cliente_inexistente(armazem):
    service = ClienteService(armazem.clientes)
    with pytest.raises(NaoEncontradoError, match="Cliente 42"):
        service.atualizar(42, ClienteUpdateDTO(name="X"))


def test_remover_inexistente(armazem):
    service = ServicoService(armazem.servicos)
    with pytest.raises(NaoEncontradoError):
        service.remover(1)


def test_servico_unidade_padrao_horas(armazem):
    service = ServicoService(armazem.servicos)
    dto = service.criar(ServicoCreateDTO(name="Suporte", description="Suporte remoto", estimatedTime=2))
    assert dto.unidade_tempo == "hours"
    assert service.obter(dto.id) == dto
