"""
pipeline.py — interpretacja jednej linii: tokenizer → parser → evaluator.

Każde wywołanie tworzy świeży CharTokenizer, parser i AST; między
wywołaniami nie ma żadnego stanu. LexError / ParseError przerywają
całą linię i są propagowane bez zmian.
"""
from __future__ import annotations

import math

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.recursive_descent_parser import RecursiveDescentParser
from adapters.tokenizer.char_tokenizer import CharTokenizer
from contracts import EvalResult, ExprAST
from ports.evaluator import Evaluator


def parse(text: str, *, strict: bool = False) -> ExprAST:
    parser = RecursiveDescentParser(CharTokenizer(text), strict=strict)
    return parser.get_ast()


def interpret(
    text: str,
    *,
    strict: bool = False,
    evaluator: Evaluator | None = None,
) -> EvalResult:
    ast = parse(text, strict=strict)
    return (evaluator or ASTEvaluator()).eval_expr(ast)


def format_value(value: float) -> str:
    """14.0 → "14", 2.5 → "2.5", inf → "inf", nan → "nan"."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)
