"""The interactive loop: read lines and report the token made from each."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from minish.ftprintf import format_printf
from minish.tokens import Token, TokenType

PROMPT = "minishell> "

try:
    import readline  # noqa: F401  (line editing and history for input())
except ImportError:
    readline = None


def run(lines: Iterable[str], out: TextIO) -> int:
    """Process ``lines`` until ``exit`` or end of input; return 0.

    Empty lines are skipped; a trailing newline on a line is ignored. At end
    of input ``exit`` is written, as an interactive shell does on Ctrl-D.
    """
    for raw in lines:
        line = raw[:-1] if raw.endswith("\n") else raw
        if not line:
            continue
        if line == "exit":
            return 0
        token = Token(TokenType.WORD, line)
        out.write(
            format_printf(
                "Token créé: type=%d, content='%s'\n", int(token.type), token.content
            )
        )
        out.flush()
    out.write("exit\n")
    out.flush()
    return 0


def _read_lines(prompt: str) -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry: run the prompt loop on standard input."""
    return run(_read_lines(PROMPT), sys.stdout)