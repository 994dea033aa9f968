"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Inicjalizuje bezstanowy ASTEvaluator (jeden na aplikację)
  - Tokenizer i parser są tworzone od nowa dla każdego żądania

Błędy LexError / ParseError → HTTP 422 z polem "error": "lex" | "parse".
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.evaluator.ast_evaluator import ASTEvaluator
from api.routers import evaluate, parse, tokenize
from api.schemas import ErrorResponse, HealthResponse
from config import Settings
from contracts import LexError, ParseError

logger = logging.getLogger("arytmos.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.evaluator = ASTEvaluator()
    logger.info("Arytmos API ready.")
    yield
    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)
    app.include_router(tokenize.router)
    app.include_router(parse.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    # Globalne handlery błędów
    @app.exception_handler(LexError)
    async def lex_error_handler(request: Request, exc: LexError):
        logger.info("lex error: %s", exc)
        body = ErrorResponse(error="lex", detail=str(exc))
        return JSONResponse(status_code=422, content=body.model_dump())

    @app.exception_handler(ParseError)
    async def parse_error_handler(request: Request, exc: ParseError):
        logger.info("parse error: %s", exc)
        body = ErrorResponse(error="parse", detail=str(exc))
        return JSONResponse(status_code=422, content=body.model_dump())

    return app


app = create_app()
