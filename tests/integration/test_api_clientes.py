from fastapi.testclient import TestClient


def _payload(**kwargs: str) -> dict[str, str]:
    dados = {
        "name": "Maria Souza",
        "document": "111.444.777-35",
        "email": "maria@example.com",
        "phone": "(11) 98765-4321",
    }
    dados.update(kwargs)
    return dados


def test_criar_cliente_retorna_201(client: TestClient) -> None:
    response = client.post("/api/customers", json=_payload())
    assert response.status_code == 201
    data = response.json()
    assert data["id"] == 1
    assert data["document"] == "11144477735"
    assert data["name"] == "Maria Souza"
    assert "createdAt" in data


def test_criar_cliente_com_cnpj(client: TestClient) -> None:
    response = client.post("/api/customers", json=_payload(document="11.222.333/0001-81"))
    assert response.status_code == 201
    assert response.json()["document"] == "11222333000181"


def test_criar_cliente_documento_invalido_retorna_422(client: TestClient) -> None:
    response = client.post("/api/customers", json=_payload(document="11144477736"))
    assert response.status_code == 422
    erros = response.json()["erros"]
    assert [e["campo"] for e in erros] == ["document"]
    assert client.get("/api/customers").json() == []


def test_criar_cliente_email_e_telefone_invalidos(client: TestClient) -> None:
    response = client.post("/api/customers", json=_payload(email="maria", phone="1234"))
    assert response.status_code == 422
    assert {e["campo"] for e in response.json()["erros"]} == {"email", "phone"}


def test_criar_cliente_sem_campo_obrigatorio(client: TestClient) -> None:
    payload = _payload()
    del payload["document"]
    response = client.post("/api/customers", json=payload)
    assert response.status_code == 422
    erro = response.json()["erros"][0]
    assert erro["campo"] == "document"
    assert erro["mensagem"] == "Campo obrigatorio"


def test_listar_clientes_em_ordem(client: TestClient) -> None:
    client.post("/api/customers", json=_payload(name="A"))
    client.post("/api/customers", json=_payload(name="B", document="52998224725"))
    data = client.get("/api/customers").json()
    assert [c["name"] for c in data] == ["A", "B"]
    assert [c["id"] for c in data] == [1, 2]


def test_atualizar_cliente_parcial(client: TestClient) -> None:
    criado = client.post("/api/customers", json=_payload()).json()
    response = client.put(f"/api/customers/{criado['id']}", json={"phone": "11 91111-2222"})
    assert response.status_code == 200
    data = response.json()
    assert data["phone"] == "11 91111-2222"
    for campo in ("id", "name", "document", "email", "createdAt"):
        assert data[campo] == criado[campo]


def test_atualizar_cliente_documento_invalido(client: TestClient) -> None:
    criado = client.post("/api/customers", json=_payload()).json()
    response = client.put(f"/api/customers/{criado['id']}", json={"document": "00000000000"})
    assert response.status_code == 422
    assert client.get(f"/api/customers/{criado['id']}").json()["document"] == "11144477735"


def test_atualizar_cliente_inexistente_retorna_404(client: TestClient) -> None:
    response = client.put("/api/customers/99", json={"name": "X"})
    assert response.status_code == 404


def test_obter_cliente(client: TestClient) -> None:
    client.post("/api/customers", json=_payload())
    assert client.get("/api/customers/1").status_code == 200
    assert client.get("/api/customers/2").status_code == 404


def test_remover_cliente(client: TestClient) -> None:
    client.post("/api/customers", json=_payload())
    assert client.delete("/api/customers/1").status_code == 204
    assert client.delete("/api/customers/1").status_code == 404
    novo = client.post("/api/customers", json=_payload()).json()
    assert novo["id"] == 2


def test_security_headers(client: TestClient) -> None:
    response = client.get("/api/customers")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_criar_cliente_email_com_dominio_malformado(client: TestClient) -> None:
    response = client.post("/api/customers", json=_payload(email="maria@example..com"))
    assert response.status_code == 422
    assert [e["campo"] for e in response.json()["erros"]] == ["email"]
    assert client.get("/api/customers").json() == []
