"""Splitting a command line into words, pipes and redirections."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from minish.errors import LexerError
from minish.strutil import is_space

UNCLOSED_QUOTES = "syntax error: unmatched or unclosed quotes"


class TokenType(IntEnum):
    """Kinds of token a command line is made of."""

    WORD = 0
    PIPE = 1
    R_INPUT = 2
    R_OUTPUT = 3
    R_APPEND = 4
    R_HEREDOC = 5


@dataclass(frozen=True)
class Token:
    """One token of a command line."""

    type: TokenType
    content: str


_REDIRECTS = frozenset(
    {TokenType.R_OUTPUT, TokenType.R_INPUT, TokenType.R_APPEND, TokenType.R_HEREDOC}
)
_META_CHARS = "|<>"
_DOUBLE_META = {">>": TokenType.R_APPEND, "<<": TokenType.R_HEREDOC}
_SINGLE_META = {"|": TokenType.PIPE, ">": TokenType.R_OUTPUT, "<": TokenType.R_INPUT}


def is_redirect(token_type: TokenType) -> bool:
    """Return True for the four redirection token types."""
    return token_type in _REDIRECTS


def is_meta(c: str) -> bool:
    """Return True for the characters that start a pipe or redirection."""
    return len(c) == 1 and c in _META_CHARS


def has_unclosed_quotes(line: str) -> bool:
    """Return True if a single or double quote in ``line`` is left open."""
    single = double = False
    for ch in line:
        if ch == "'" and not double:
            single = not single
        elif ch == '"' and not single:
            double = not double
    return single or double


def _quoted(line: str, index: int, quote: str) -> tuple[str, int]:
    start = index + 1
    end = line.find(quote, start)
    if end < 0:
        return line[start:], len(line)
    return line[start:end], end + 1


def single_quote(line: str, index: int) -> tuple[str, int]:
    """Read the single-quoted text whose opening quote is at ``index``.

    Returns the text between the quotes and the index just past the closing
    quote (or the end of the line if there is none).
    """
    return _quoted(line, index, "'")


def _double_quote(line: str, index: int) -> tuple[str, int]:
    return _quoted(line, index, '"')


def _meta_token(line: str, index: int) -> tuple[Token, int]:
    pair = line[index : index + 2]
    if pair in _DOUBLE_META:
        return Token(_DOUBLE_META[pair], pair), index + 2
    ch = line[index]
    return Token(_SINGLE_META[ch], ch), index + 1


def _word_token(line: str, index: int) -> tuple[Token, int]:
    parts: list[str] = []
    length = len(line)
    while index < length and not is_space(line[index]) and not is_meta(line[index]):
        ch = line[index]
        if ch == "'":
            text, index = single_quote(line, index)
        elif ch == '"':
            text, index = _double_quote(line, index)
        else:
            start = index
            while (
                index < length
                and line[index] not in "'\""
                and not is_space(line[index])
                and not is_meta(line[index])
            ):
                index += 1
            text = line[start:index]
        parts.append(text)
    return Token(TokenType.WORD, "".join(parts)), index


def tokenize(line: str) -> list[Token]:
    """Split ``line`` into tokens.

    Raises LexerError (status 2) when a quote is left unclosed.
    """
    if has_unclosed_quotes(line):
        raise LexerError(UNCLOSED_QUOTES, 2)
    tokens: list[Token] = []
    index = 0
    while index < len(line):
        ch = line[index]
        if is_space(ch):
            index += 1
            continue
        if is_meta(ch):
            token, index = _meta_token(line, index)
        else:
            token, index = _word_token(line, index)
        tokens.append(token)
    return tokens