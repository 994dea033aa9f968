"""
Port: ExpressionParser
Odpowiedzialność: budowa AST z tokenów pobieranych z Tokenizera.
"""
from typing import Protocol, runtime_checkable

from contracts import ExprAST


@runtime_checkable
class ExpressionParser(Protocol):
    def get_ast(self) -> ExprAST:
        """
        Parses a complete expression and returns the root AST node.
        Raises ParseError when the token stream does not match the grammar
        and propagates LexError from the tokenizer.
        """
        ...
