"""
Adapter: RecursiveDescentParser
Implementuje port ExpressionParser — zejście rekurencyjne z jednym tokenem lookahead.

Gramatyka (priorytet rośnie w dół):
  expr       = term      (ADDITIVE_OP term)*
  term       = factor    (MULTIPLICATIVE_OP factor)*
  factor     = powerTerm (POWER powerTerm)*
  powerTerm  = '(' expr ')' | ADDITIVE_OP powerTerm | INTEGER

Poziomy binarne to pętle składające węzeł w lewo, więc wszystkie operatory
są lewostronnie łączne — także '^': 2^3^2 == (2^3)^2 == 64.
Unarne +/- wiąże mocniej niż każdy operator binarny i może się powtarzać (--5).

Po zbudowaniu AST parser NIE sprawdza, czy lookahead to EOF: "2+3)" daje 5.
Tryb strict=True zaostrza to (EOF wymagany) oraz sprawdza, że grupę zamyka ')'.

Zagnieżdżenie ponad limit rekursji (ok. 5000 nawiasów lub 20000 unarnych
znaków) kończy się ParseError, nie RecursionError.
"""
from __future__ import annotations

import sys

from contracts import (
    AdditiveOpToken,
    BinaryOperation,
    ExprAST,
    IntegerToken,
    MultiplicativeOpToken,
    NumberLiteral,
    ParenToken,
    ParseError,
    PowerToken,
    Token,
    TokenKind,
    UnaryOperation,
)
from ports.tokenizer import Tokenizer

_POWER_TERM_START = f"PAREN('(') | {TokenKind.ADDITIVE_OP.value} | {TokenKind.INTEGER.value}"

# Każdy poziom nawiasów to 4 ramki (_power_term → _expr → _term → _factor),
# więc limit pozwala na ok. 5000 poziomów zagnieżdżenia
_RECURSION_LIMIT = 20_000


class RecursiveDescentParser:
    """Buduje AST jednej linii; instancja jest jednorazowa."""

    def __init__(self, tokenizer: Tokenizer, strict: bool = False) -> None:
        self._tokenizer = tokenizer
        self._strict = strict
        self._current: Token = tokenizer.next_token()

    @property
    def lookahead(self) -> Token:
        return self._current

    # -- ExpressionParser protocol -----------------------------------------

    def get_ast(self) -> ExprAST:
        previous = sys.getrecursionlimit()
        sys.setrecursionlimit(max(previous, _RECURSION_LIMIT))
        try:
            node = self._expr()
        except RecursionError:
            raise ParseError("nesting within depth limit", self._current.kind.value) from None
        finally:
            sys.setrecursionlimit(previous)
        if self._strict and self._current.kind != TokenKind.EOF:
            raise ParseError(TokenKind.EOF.value, self._current.kind.value)
        return node

    def eat(self, kind: TokenKind) -> None:
        """Jedyny punkt konsumpcji tokenów."""
        if self._current.kind != kind:
            raise ParseError(kind.value, self._current.kind.value)
        self._current = self._tokenizer.next_token()

    # -- Reguły gramatyki ---------------------------------------------------

    def _expr(self) -> ExprAST:
        node = self._term()
        while isinstance(self._current, AdditiveOpToken):
            op = self._current
            self.eat(TokenKind.ADDITIVE_OP)
            node = BinaryOperation(left=node, op=op, right=self._term())
        return node

    def _term(self) -> ExprAST:
        node = self._factor()
        while isinstance(self._current, MultiplicativeOpToken):
            op = self._current
            self.eat(TokenKind.MULTIPLICATIVE_OP)
            node = BinaryOperation(left=node, op=op, right=self._factor())
        return node

    def _factor(self) -> ExprAST:
        node = self._power_term()
        while isinstance(self._current, PowerToken):
            op = self._current
            self.eat(TokenKind.POWER)
            node = BinaryOperation(left=node, op=op, right=self._power_term())
        return node

    def _power_term(self) -> ExprAST:
        token = self._current
        if isinstance(token, ParenToken) and token.symbol == "(":
            self.eat(TokenKind.PAREN)
            node = self._expr()
            self._close_paren()
            return node
        if isinstance(token, AdditiveOpToken):
            self.eat(TokenKind.ADDITIVE_OP)
            return UnaryOperation(op=token, operand=self._power_term())
        if isinstance(token, IntegerToken):
            self.eat(TokenKind.INTEGER)
            return NumberLiteral(value=token.value)
        raise ParseError(_POWER_TERM_START, token.kind.value)

    def _close_paren(self) -> None:
        # Bez strict wystarczy dowolny PAREN, jak przy każdym eat()
        token = self._current
        if self._strict and isinstance(token, ParenToken) and token.symbol != ")":
            raise ParseError("PAREN(')')", "PAREN('(')")
        self.eat(TokenKind.PAREN)
