import csv
import io

from fastapi.testclient import TestClient


def _linhas(texto: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(texto)))


def test_export_clientes_csv(client: TestClient) -> None:
    client.post(
        "/api/customers",
        json={"name": "Maria", "document": "11144477735", "email": "m@example.com", "phone": "11987654321"},
    )
    response = client.get("/api/customers/export")
    assert response.status_code == 200
    assert "text/csv" in response.headers["content-type"]
    assert "customers.csv" in response.headers["content-disposition"]

    linhas = _linhas(response.text)
    assert linhas[0] == ["id", "name", "document", "email", "phone", "createdAt"]
    assert linhas[1][:5] == ["1", "Maria", "111.444.777-35", "m@example.com", "11987654321"]


def test_export_vazio_so_cabecalho(client: TestClient) -> None:
    response = client.get("/api/services/export")
    assert response.status_code == 200
    assert _linhas(response.text) == [["id", "name", "description", "estimatedTime", "timeUnit", "createdAt"]]


def test_export_funcionarios(client: TestClient) -> None:
    client.post(
        "/api/employees",
        json={"name": "Ana", "position": "Analista", "email": "a@example.com", "phone": "11987654321"},
    )
    linhas = _linhas(client.get("/api/employees/export").text)
    assert linhas[0] == ["id", "name", "position", "email", "phone", "status", "role", "createdAt"]
    assert linhas[1][5:7] == ["active", "funcionario"]
