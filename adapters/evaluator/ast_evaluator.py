"""
Adapter: ASTEvaluator
Implementuje port Evaluator — przejście ExprAST (post-order, jawny stos) na liczbach float.

Arytmetyka jest rzeczywista (IEEE 754), nie całkowita:
  10 / 4  = 2.5
  10 / 0  = inf,  -10 / 0 = -inf,  0 / 0 = nan
  2 ^ -1  = 0.5,  (-8) ^ (1/3) = nan  (nigdy liczba zespolona)
  1 ^ nan = nan,  (-1) ^ inf = nan
Żadna anomalia arytmetyczna nie rzuca wyjątku, wynik jest po prostu wartością.
"""
from __future__ import annotations

import logging
import math

from contracts import (
    AdditiveOpToken,
    BinaryOperation,
    EvalResult,
    ExprAST,
    MultiplicativeOpToken,
    NumberLiteral,
    PowerToken,
    UnaryOperation,
)

logger = logging.getLogger("arytmos.evaluator")


def _real_div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1


def _real_pow(a: float, b: float) -> float:
    # math.pow daje 1.0 dla 1 ** nan i (-1) ** ±inf; tu wynik to nan
    if math.isnan(b) or (math.isinf(b) and abs(a) == 1):
        return math.nan
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and _is_odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        # math.pow: 0 ** ujemna albo ujemna ** ułamkowa
        if a == 0:
            if _is_odd_integer(b):
                return math.copysign(math.inf, a)
            return math.inf
        return math.nan


def _to_real(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf


# Mapowanie symboli operatorów binarnych na operacje float
_OP_FUNCS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _real_div,
    "^": _real_pow,
}


class ASTEvaluator:
    """Ewaluator wyrażeń arytmetycznych oparty na AST."""

    # -- Evaluator protocol ------------------------------------------------

    def eval_expr(self, ast: ExprAST) -> EvalResult:
        value, steps = self._eval(ast)
        return EvalResult(value=value, steps=steps)

    # -- Prywatne ----------------------------------------------------------

    def _eval(self, root: ExprAST) -> tuple[float, list[str]]:
        """
        Zwraca (wartość, lista kroków).
        Post-order z jawnym stosem: lewe poddrzewo, prawe, węzeł. Długie
        łańcuchy "1+1+...+1" dają drzewa o głębokości równej liczbie operatorów.
        """
        values: list[float] = []
        steps: list[str] = []
        stack: list[tuple[ExprAST, bool]] = [(root, False)]
        while stack:
            node, expanded = stack.pop()
            if not expanded:
                logger.debug("at %s", type(node).__name__)
                if isinstance(node, NumberLiteral):
                    values.append(_to_real(node.value))
                    logger.debug("from NumberLiteral got %s", values[-1])
                    continue
                if isinstance(node, UnaryOperation):
                    stack += [(node, True), (node.operand, False)]
                elif isinstance(node, BinaryOperation):
                    stack += [(node, True), (node.right, False), (node.left, False)]
                else:
                    raise TypeError(f"Nieznany typ węzła AST: {type(node)}")
                continue

            values.append(self._reduce(node, values, steps))
            logger.debug("from %s got %s", type(node).__name__, values[-1])
        return values.pop(), steps

    def _reduce(self, node: ExprAST, values: list[float], steps: list[str]) -> float:
        """Składa węzeł z wartości dzieci zdjętych ze stosu wartości."""
        if isinstance(node, UnaryOperation):
            val = values.pop()
            if node.op.symbol == "+":
                return val
            result = -val
            steps.append(f"-({_fmt(val)}) = {_fmt(result)}")
            return result

        if isinstance(node, BinaryOperation):
            right_val = values.pop()
            left_val = values.pop()

            op = node.op
            if isinstance(op, (AdditiveOpToken, MultiplicativeOpToken)):
                symbol = op.symbol
            elif isinstance(op, PowerToken):
                symbol = "^"
            else:
                raise TypeError(f"Nieznany operator: {op!r}")

            result = _OP_FUNCS[symbol](left_val, right_val)
            steps.append(f"{_fmt(left_val)} {symbol} {_fmt(right_val)} = {_fmt(result)}")
            return result

        raise TypeError(f"Nieznany typ węzła AST: {type(node)}")


def _fmt(v: float) -> str:
    """Czytelna reprezentacja float: 14 zamiast 14.0, inf, -inf, nan."""
    if math.isfinite(v) and v.is_integer():
        return str(int(v))
    return repr(v)
