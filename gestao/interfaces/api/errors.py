# gestao/interfaces/api/errors.py
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gestao.domain.exceptions import AutorizacaoError, NaoEncontradoError, ValidacaoError


def _corpo_422(erros: list[dict[str, str]]) -> dict[str, object]:
    campos = ", ".join(e["campo"] for e in erros)
    return {"detail": f"Dados invalidos: {campos}", "erros": erros}


async def _validacao(request: Request, exc: ValidacaoError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "detail": str(exc),
            "erros": [{"campo": e.campo, "mensagem": e.mensagem} for e in exc.erros],
        },
    )


async def _requisicao_invalida(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Erros de tipo/ausencia detectados pelo pydantic saem no mesmo formato dos de dominio.
    erros = [
        {
            "campo": str(e["loc"][-1]) if e["loc"] else "body",
            "mensagem": "Campo obrigatorio" if e["type"] == "missing" else e["msg"],
        }
        for e in exc.errors()
    ]
    return JSONResponse(status_code=422, content=_corpo_422(erros))


async def _nao_encontrado(request: Request, exc: NaoEncontradoError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _autorizacao(request: Request, exc: AutorizacaoError) -> JSONResponse:
    return JSONResponse(status_code=403, content={"detail": str(exc)})


def registrar_handlers(app: FastAPI) -> None:
    """Cada erro de dominio vira um status proprio; nenhum derruba o processo."""
    app.add_exception_handler(ValidacaoError, _validacao)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _requisicao_invalida)  # type: ignore[arg-type]
    app.add_exception_handler(NaoEncontradoError, _nao_encontrado)  # type: ignore[arg-type]
    app.add_exception_handler(AutorizacaoError, _autorizacao)  # type: ignore[arg-type]
