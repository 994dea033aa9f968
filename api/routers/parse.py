"""
Router: POST /parse
Zwraca AST wyrażenia bez obliczania go.
"""
from fastapi import APIRouter, Depends

from api.dependencies import get_settings, resolve_strict
from api.schemas import ExpressionRequest, ParseResponse
from contracts import show_expr
from pipeline import parse

router = APIRouter(prefix="/parse", tags=["parse"])


@router.post("", response_model=ParseResponse)
async def parse_text(
    body: ExpressionRequest,
    settings=Depends(get_settings),
) -> ParseResponse:
    ast = parse(body.text, strict=resolve_strict(body.strict, settings))
    return ParseResponse(text=body.text, ast=ast, display=show_expr(ast))
