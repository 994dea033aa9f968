"""
Router: POST /tokenize
Zwraca pełną listę tokenów linii (łącznie z EOF).
"""
from fastapi import APIRouter

from adapters.tokenizer.char_tokenizer import tokenize
from api.schemas import ExpressionRequest, TokenizeResponse

router = APIRouter(prefix="/tokenize", tags=["tokenize"])


@router.post("", response_model=TokenizeResponse)
async def tokenize_text(body: ExpressionRequest) -> TokenizeResponse:
    return TokenizeResponse(text=body.text, tokens=tokenize(body.text))
