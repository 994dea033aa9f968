#!/usr/bin/env python3
"""
arytmos.py — CLI narzędzie Arytmos.

Działa całkowicie lokalnie, nie wymaga uruchomionego serwera API.

Konfiguracja: zmienne środowiskowe z prefiksem ARYTMOS_
lub plik .env (np. ARYTMOS_STRICT_TRAILING_INPUT=true).

Podkomendy:
    repl    — interaktywna pętla: linia → wynik lub błąd, w nieskończoność
    eval    — oblicz jedno wyrażenie
    tokens  — pokaż tokeny wyrażenia
    ast     — pokaż AST wyrażenia (JSON)

Użycie:
    python arytmos.py repl
    python arytmos.py eval --text "2 + 3 * 4"
    python arytmos.py eval --steps -t "(2+3)*4"
    echo "2^3^2" | python arytmos.py eval
    python arytmos.py tokens -t "-5 + 3"
    python arytmos.py ast -t "2^3^2"
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Callable

from rich import box
from rich.console import Console
from rich.table import Table

from config import Settings
from contracts import ExpressionError, LexError, ParseError, show_expr, show_token


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _safe_terminal_text(value: Any) -> str:
    s = str(value)
    encoding = sys.stdout.encoding or "utf-8"
    try:
        s.encode(encoding)
        return s
    except UnicodeEncodeError:
        return s.encode(encoding, errors="replace").decode(encoding, errors="replace")


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(_safe_terminal_text(key), _safe_terminal_text(value))
    _console().print(table)


def _print_tokens_table(tokens: list[Any]) -> None:
    table = Table(title=f"Tokens [{len(tokens)}]", box=box.ASCII, show_lines=False)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Kind", no_wrap=True, style="cyan")
    table.add_column("Text", no_wrap=True)
    for i, token in enumerate(tokens):
        table.add_row(str(i), token.kind.value, _safe_terminal_text(show_token(token)))
    _console().print(table)


def _describe_error(exc: ExpressionError) -> str:
    if isinstance(exc, LexError):
        return f"Lex error: {exc}"
    if isinstance(exc, ParseError):
        return f"Parse error: {exc}"
    return f"Error: {exc}"


def _read_text(args: argparse.Namespace) -> str:
    text = getattr(args, "text", None) or sys.stdin.read().strip()
    if not text:
        print("Błąd: podaj wyrażenie przez --text lub stdin", file=sys.stderr)
        sys.exit(1)
    return text


def _setup_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level.upper())


# -- podkomendy ------------------------------------------------------------

def _interpret_line(line: str, settings: Settings) -> str:
    """Jedna iteracja pętli REPL: wynik albo opis błędu, nigdy wyjątek."""
    from pipeline import format_value, interpret

    try:
        result = interpret(line, strict=settings.strict_trailing_input)
    except ExpressionError as e:
        return _describe_error(e)
    out = format_value(result.value)
    if settings.show_steps and result.steps:
        out = "\n".join(["  " + s for s in result.steps] + [out])
    return out


def _repl(args: argparse.Namespace, read_line: Callable[[str], str] = input) -> None:
    settings = Settings()
    while True:
        try:
            line = read_line(settings.prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if not line.strip():
            continue
        print(_interpret_line(line, settings))


def _eval(args: argparse.Namespace) -> None:
    from pipeline import format_value, interpret

    settings = Settings()
    text = _read_text(args)
    strict = args.strict or settings.strict_trailing_input
    try:
        result = interpret(text, strict=strict)
    except ExpressionError as e:
        print(_describe_error(e), file=sys.stderr)
        sys.exit(1)

    if not (args.steps or settings.show_steps):
        print(format_value(result.value))
        return

    rows: list[tuple[str, Any]] = [("expr", text)]
    rows += [(f"step {i}", s) for i, s in enumerate(result.steps, 1)]
    rows.append(("result", format_value(result.value)))
    _print_kv_table("Evaluation", rows)


def _tokens(args: argparse.Namespace) -> None:
    from adapters.tokenizer.char_tokenizer import tokenize

    text = _read_text(args)
    try:
        tokens = tokenize(text)
    except LexError as e:
        print(_describe_error(e), file=sys.stderr)
        sys.exit(1)
    _print_tokens_table(tokens)


def _ast(args: argparse.Namespace) -> None:
    from pipeline import parse

    settings = Settings()
    text = _read_text(args)
    try:
        ast = parse(text, strict=args.strict or settings.strict_trailing_input)
    except ExpressionError as e:
        print(_describe_error(e), file=sys.stderr)
        sys.exit(1)
    if args.compact:
        print(show_expr(ast))
    else:
        print(ast.model_dump_json(indent=2))


# -- main ------------------------------------------------------------------

def main() -> None:
    parser = argparse.ArgumentParser(
        prog="arytmos",
        description="Arytmos — kalkulator wyrażeń arytmetycznych (CLI)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # repl
    sub.add_parser("repl", help="Interaktywna pętla expr> ...")

    # eval
    p = sub.add_parser("eval", help="Oblicz jedno wyrażenie")
    p.add_argument("--text", "-t", help="Wyrażenie (lub stdin)")
    p.add_argument("--steps", "-s", action="store_true",
                   help="Pokaż kroki redukcji")
    p.add_argument("--strict", action="store_true",
                   help="Odrzuć nadmiarowe tokeny po wyrażeniu")

    # tokens
    p = sub.add_parser("tokens", help="Pokaż tokeny wyrażenia")
    p.add_argument("--text", "-t", help="Wyrażenie (lub stdin)")

    # ast
    p = sub.add_parser("ast", help="Pokaż AST wyrażenia")
    p.add_argument("--text", "-t", help="Wyrażenie (lub stdin)")
    p.add_argument("--compact", "-c", action="store_true",
                   help="Jedna linia z pełnym nawiasowaniem zamiast JSON")
    p.add_argument("--strict", action="store_true",
                   help="Odrzuć nadmiarowe tokeny po wyrażeniu")

    args = parser.parse_args()
    _setup_logging(Settings())

    cmds = {
        "repl":   _repl,
        "eval":   _eval,
        "tokens": _tokens,
        "ast":    _ast,
    }
    cmds[args.command](args)


if __name__ == "__main__":
    main()
