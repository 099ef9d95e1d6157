# gestao/interfaces/api/main.py
from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from gestao.infrastructure.armazem import Armazem, criar_armazem
from gestao.infrastructure.config import Settings, get_settings
from gestao.infrastructure.log import setup_logging
from gestao.interfaces.api.errors import registrar_handlers
from gestao.interfaces.api.routes.cliente_routes import router as cliente_router
from gestao.interfaces.api.routes.funcionario_routes import router as funcionario_router
from gestao.interfaces.api.routes.servico_routes import router as servico_router
from gestao.interfaces.api.routes.stats_routes import router as stats_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("API iniciada; cadastros em memoria (nada persiste entre reinicios)")
    yield
    logger.info("API encerrada")


async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[operator]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[no-any-return]


def criar_app(armazem: Armazem | None = None, settings: Settings | None = None) -> FastAPI:
    """Fabrica da API. Cada chamada sem armazem parte de cadastros vazios."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title="Gestao Empresarial API",
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url=None,
    )
    app.state.armazem = armazem if armazem is not None else criar_armazem()

    app.middleware("http")(add_security_headers)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    registrar_handlers(app)

    app.include_router(cliente_router, prefix="/api")
    app.include_router(funcionario_router, prefix="/api")
    app.include_router(servico_router, prefix="/api")
    app.include_router(stats_router, prefix="/api")
    return app


app = criar_app()
