"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni obiekt przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.evaluator.ast_evaluator import ASTEvaluator
from config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_evaluator(request: Request) -> ASTEvaluator:
    return request.app.state.evaluator


def resolve_strict(requested: bool | None, settings: Settings) -> bool:
    return settings.strict_trailing_input if requested is None else requested
