from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.infrastructure.config import get_settings
from api.infrastructure.log import configurar_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from api.infrastructure.duckdb_connection import get_connection
    configurar_logging(get_settings().log_level)
    get_connection()  # cria o schema no startup
    logger.info("API iniciada")
    yield


app = FastAPI(
    title="Panda API",
    debug=False,  # NUNCA True em producao
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def erro_interno(request: Request, call_next: object) -> Response:
    """Qualquer excecao nao tratada nas rotas vira 500 com a mensagem original."""
    try:
        return await call_next(request)  # type: ignore[misc,no-any-return]
    except Exception as err:  # noqa: BLE001
        logger.exception("Erro nao tratado em %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": f"Erro interno: {err}"})


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

from api.interfaces.api.routes.estoque_routes import router as estoque_router  # noqa: E402
from api.interfaces.api.routes.financeiro_routes import router as financeiro_router  # noqa: E402
from api.interfaces.api.routes.viagem_routes import router as viagem_router  # noqa: E402

app.include_router(estoque_router, prefix="/api")
app.include_router(financeiro_router, prefix="/api")
app.include_router(viagem_router)
