from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from gestao.infrastructure.armazem import Armazem, criar_armazem


@pytest.fixture()
def armazem() -> Armazem:
    """Cadastros vazios e isolados por teste."""
    return criar_armazem()


@pytest.fixture()
def client(armazem: Armazem) -> Generator[TestClient, None, None]:
    """TestClient com armazem proprio injetado na fabrica da app."""
    from gestao.interfaces.api.main import criar_app

    with TestClient(criar_app(armazem)) as c:
        yield c
