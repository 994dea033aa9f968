"""
Port: Tokenizer
Odpowiedzialność: leniwe dzielenie linii tekstu na tokeny, jeden na żądanie.
"""
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Tokenizer(Protocol):
    def next_token(self) -> Token:
        """
        Returns the next token and advances the cursor past it.
        Once the input is exhausted, returns EndOfInputToken on every call.
        Raises LexError when the current character starts no token.
        """
        ...
