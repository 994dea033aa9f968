"""
contracts.py — Jedyne źródło prawdy dla wszystkich typów danych w Arytmos.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.

Tokeny i węzły AST są niemutowalne (frozen): tworzone raz, konsumowane raz.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Tokenizer ───────────────────────────────────

class TokenKind(str, Enum):
    INTEGER = "INTEGER"                      # np. 42
    ADDITIVE_OP = "ADDITIVE_OP"              # + -
    MULTIPLICATIVE_OP = "MULTIPLICATIVE_OP"  # * /
    POWER = "POWER"                          # ^
    PAREN = "PAREN"                          # ( )
    EOF = "EOF"                              # koniec wejścia


class _Token(BaseModel):
    model_config = ConfigDict(frozen=True)


class IntegerToken(_Token):
    kind: Literal[TokenKind.INTEGER] = TokenKind.INTEGER
    value: int


class AdditiveOpToken(_Token):
    kind: Literal[TokenKind.ADDITIVE_OP] = TokenKind.ADDITIVE_OP
    symbol: Literal["+", "-"]


class MultiplicativeOpToken(_Token):
    kind: Literal[TokenKind.MULTIPLICATIVE_OP] = TokenKind.MULTIPLICATIVE_OP
    symbol: Literal["*", "/"]


class PowerToken(_Token):
    kind: Literal[TokenKind.POWER] = TokenKind.POWER


class ParenToken(_Token):
    kind: Literal[TokenKind.PAREN] = TokenKind.PAREN
    symbol: Literal["(", ")"]


class EndOfInputToken(_Token):
    kind: Literal[TokenKind.EOF] = TokenKind.EOF


Token = Union[
    IntegerToken, AdditiveOpToken, MultiplicativeOpToken,
    PowerToken, ParenToken, EndOfInputToken,
]

BinaryOpToken = Union[AdditiveOpToken, MultiplicativeOpToken, PowerToken]


def _int_text(value: int) -> str:
    # str() odmawia konwersji powyżej sys.get_int_max_str_digits() cyfr
    try:
        return str(value)
    except ValueError:
        return f"<{value.bit_length()}-bit integer>"


def show_token(token: Token) -> str:
    """Krótka reprezentacja tokenu do logów i tabel CLI."""
    if isinstance(token, IntegerToken):
        return _int_text(token.value)
    if isinstance(token, (AdditiveOpToken, MultiplicativeOpToken, ParenToken)):
        return token.symbol
    if isinstance(token, PowerToken):
        return "^"
    return "<eof>"


# ─────────────────────────── AST ─────────────────────────────────────────

class NumberLiteral(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["number"] = "number"
    value: int


class UnaryOperation(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["unary"] = "unary"
    op: AdditiveOpToken
    operand: "ExprAST"


class BinaryOperation(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["binop"] = "binop"
    left: "ExprAST"
    op: BinaryOpToken
    right: "ExprAST"


ExprAST = Union[NumberLiteral, UnaryOperation, BinaryOperation]
UnaryOperation.model_rebuild()
BinaryOperation.model_rebuild()


def show_expr(node: ExprAST) -> str:
    """
    W pełni nawiasowana postać AST, np. ((2 ^ 3) ^ 2).
    Przejście post-order z jawnym stosem: głębokość drzewa nie jest ograniczona.
    """
    parts: list[str] = []
    stack: list[tuple[ExprAST, bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if isinstance(current, NumberLiteral):
            parts.append(_int_text(current.value))
        elif isinstance(current, UnaryOperation):
            if not expanded:
                stack += [(current, True), (current.operand, False)]
                continue
            parts.append(f"({current.op.symbol}{parts.pop()})")
        elif isinstance(current, BinaryOperation):
            if not expanded:
                stack += [(current, True), (current.right, False), (current.left, False)]
                continue
            right = parts.pop()
            left = parts.pop()
            parts.append(f"({left} {show_token(current.op)} {right})")
        else:
            raise TypeError(f"Nieznany typ węzła AST: {type(current)}")
    return parts.pop()


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    value: float                                     # inf / nan dozwolone
    steps: list[str] = Field(default_factory=list)  # czytelne kroki redukcji


# ─────────────────────────── Błędy ───────────────────────────────────────

class ExpressionError(Exception):
    """Wspólna baza błędów przerywających interpretację całej linii."""


class LexError(ExpressionError):
    """Znak na pozycji kursora nie rozpoczyna żadnego tokenu."""

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(f"unexpected character {char!r} at position {position}")


class ParseError(ExpressionError):
    """Token lookahead nie pasuje do stosowanej reguły gramatyki."""

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"expected kind {expected} but found kind {found}")
