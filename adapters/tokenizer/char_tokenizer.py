"""
Adapter: CharTokenizer
Implementuje port Tokenizer — skaner znak po znaku z jednym kursorem.

Rozpoznawane tokeny:
  INTEGER            — maksymalny ciąg cyfr dziesiętnych (bez znaku)
  ADDITIVE_OP        — '+' lub '-'
  MULTIPLICATIVE_OP  — '*' lub '/'
  POWER              — '^'
  PAREN              — '(' lub ')'
  EOF                — koniec wejścia (zwracany w nieskończoność)

Pomijane są tylko spacje; tabulator czy znak nowej linii to LexError.
"""
from __future__ import annotations

import logging

from contracts import (
    AdditiveOpToken,
    EndOfInputToken,
    IntegerToken,
    LexError,
    MultiplicativeOpToken,
    ParenToken,
    PowerToken,
    Token,
    show_token,
)

logger = logging.getLogger("arytmos.tokenizer")

_DIGITS = "0123456789"

# int(str) odmawia powyżej sys.get_int_max_str_digits() (domyślnie 4300) cyfr
_DIGIT_CHUNK = 1000


class CharTokenizer:
    """Leniwy tokenizer jednej linii wyrażenia."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    # -- Tokenizer protocol ------------------------------------------------

    def next_token(self) -> Token:
        token = self._scan()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("token %s at %d: %s", token.kind.value, self._pos, show_token(token))
        return token

    # -- Prywatne ----------------------------------------------------------

    def _current(self) -> str | None:
        return self._text[self._pos] if self._pos < len(self._text) else None

    def _skip_spaces(self) -> None:
        while self._current() == " ":
            self._pos += 1

    def _scan(self) -> Token:
        self._skip_spaces()
        ch = self._current()
        if ch is None:
            return EndOfInputToken()
        if ch in _DIGITS:
            return self._integer()
        if ch in "+-":
            self._pos += 1
            return AdditiveOpToken(symbol=ch)
        if ch in "*/":
            self._pos += 1
            return MultiplicativeOpToken(symbol=ch)
        if ch == "^":
            self._pos += 1
            return PowerToken()
        if ch in "()":
            self._pos += 1
            return ParenToken(symbol=ch)
        raise LexError(ch, self._pos)

    def _integer(self) -> IntegerToken:
        start = self._pos
        while self._pos < len(self._text) and self._text[self._pos] in _DIGITS:
            self._pos += 1
        return IntegerToken(value=_digits_to_int(self._text[start:self._pos]))


def _digits_to_int(digits: str) -> int:
    """Wartość ciągu cyfr dowolnej długości, składana kawałkami."""
    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start:start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def tokenize(text: str) -> list[Token]:
    """Wszystkie tokeny linii, łącznie z pierwszym (i jedynym) EOF."""
    tokenizer = CharTokenizer(text)
    tokens: list[Token] = []
    while True:
        token = tokenizer.next_token()
        tokens.append(token)
        if isinstance(token, EndOfInputToken):
            return tokens
