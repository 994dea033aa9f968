"""
Port: Evaluator
Odpowiedzialność: redukcja AST do jednej wartości rzeczywistej.
"""
from typing import Protocol, runtime_checkable

from contracts import EvalResult, ExprAST


@runtime_checkable
class Evaluator(Protocol):
    def eval_expr(self, ast: ExprAST) -> EvalResult:
        """
        Evaluates an arithmetic AST to a real (float) result.
        Returns EvalResult with:
          - value: float; inf / -inf / nan are valid outcomes
          - steps: list of human-readable reduction steps
        Never raises for arithmetic anomalies (division by zero, overflow,
        pow domain errors); these are encoded in the float value.
        """
        ...
