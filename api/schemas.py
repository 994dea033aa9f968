"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from contracts import ExprAST, Token


class ExpressionRequest(BaseModel):
    text: str
    strict: Optional[bool] = None  # None = wartość z Settings


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateResponse(BaseModel):
    text: str
    value: Optional[float] = None  # None dla inf/nan (JSON ich nie zna)
    display: str                   # "14", "2.5", "inf", "-inf", "nan"
    is_finite: bool
    steps: list[str] = Field(default_factory=list)


# ─────────────────────────── /tokenize ───────────────────────────

class TokenizeResponse(BaseModel):
    text: str
    tokens: list[Token]


# ─────────────────────────── /parse ──────────────────────────────

class ParseResponse(BaseModel):
    text: str
    ast: ExprAST
    display: str  # pełne nawiasowanie, np. ((2 ^ 3) ^ 2)


# ─────────────────────────── errors / health ─────────────────────

class ErrorResponse(BaseModel):
    error: Literal["lex", "parse"]
    detail: str


class HealthResponse(BaseModel):
    status: str
    version: str
