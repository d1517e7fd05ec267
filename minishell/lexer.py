"""Splitting of a single command into whitespace-separated lexemes."""

from __future__ import annotations

_BLANKS = " \t"
_QUOTES = "\"'"


def _token_end(text: str, pos: int) -> int:
    while pos < len(text):
        ch = text[pos]
        if ch in _BLANKS:
            break
        if ch in _QUOTES:
            close = text.find(ch, pos + 1)
            if close == -1:
                return len(text)
            pos = close
        pos += 1
    return pos


def lex(text: str) -> list[str]:
    """Split ``text`` on spaces and tabs, keeping quoted runs inside one lexeme."""
    tokens: list[str] = []
    pos = 0
    while True:
        while pos < len(text) and text[pos] in _BLANKS:
            pos += 1
        if pos >= len(text):
            return tokens
        end = _token_end(text, pos)
        tokens.append(text[pos:end])
        pos = end