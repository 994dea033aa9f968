"""
Router: POST /evaluate
Interpretuje jedną linię: tokenizer → parser → evaluator.
LexError / ParseError obsługuje globalny handler w api/main.py (HTTP 422).
"""
import math

from fastapi import APIRouter, Depends

from api.dependencies import get_evaluator, get_settings, resolve_strict
from api.schemas import EvaluateResponse, ExpressionRequest
from pipeline import format_value, interpret

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post("", response_model=EvaluateResponse)
async def evaluate(
    body: ExpressionRequest,
    settings=Depends(get_settings),
    evaluator=Depends(get_evaluator),
) -> EvaluateResponse:
    result = interpret(
        body.text,
        strict=resolve_strict(body.strict, settings),
        evaluator=evaluator,
    )
    finite = math.isfinite(result.value)
    return EvaluateResponse(
        text=body.text,
        value=result.value if finite else None,
        display=format_value(result.value),
        is_finite=finite,
        steps=result.steps,
    )
