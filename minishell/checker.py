"""Syntax checks run on a command line before it is expanded and executed."""

from __future__ import annotations

from minishell.errors import CheckerErrorKind, checker_error
from minishell.strutil import split

_BLANKS = " \t"


def _skip_blanks(word: str, pos: int) -> int:
    while pos < len(word) and word[pos] in _BLANKS:
        pos += 1
    return pos


def _quotes_unbalanced(words: list[str]) -> bool:
    in_single = False
    in_double = False
    for word in words:
        for ch in word:
            if ch == "'" and not in_double:
                in_single = not in_single
            elif ch == '"' and not in_single:
                in_double = not in_double
    return in_single or in_double


def _heredoc_without_delimiter(word: str) -> bool:
    pos = 0
    while pos < len(word):
        if word.startswith("<<", pos):
            pos = _skip_blanks(word, pos + 2)
            if pos == len(word):
                return True
        else:
            pos += 1
    return False


def _redirection_without_file(word: str) -> bool:
    pos = 0
    while pos < len(word):
        if word[pos] in "<>":
            pos = _skip_blanks(word, pos + 1)
            if pos == len(word):
                return True
        else:
            pos += 1
    return False


def _bad_pipe(word: str, is_last: bool) -> bool:
    pos = 0
    while pos < len(word):
        if word[pos] == "|":
            pos += 1
            if word[pos:pos + 1] == "|":
                return True
            pos = _skip_blanks(word, pos)
            if pos == len(word) and is_last:
                return True
        else:
            pos += 1
    return False


def check(text: str) -> list[CheckerErrorKind]:
    """Check ``text`` for syntax errors, printing a message for each one.

    Returns the errors found in the order they were reported; an empty list
    means the line may be run. A line made only of spaces raises
    :class:`ValueError`.
    """
    words = split(text, " ")
    if not words:
        raise ValueError("empty command line")
    last = words[-1]
    found: list[CheckerErrorKind] = []
    if _quotes_unbalanced(words):
        found.append(CheckerErrorKind.OPEN_QUOTE)
    if _heredoc_without_delimiter(last):
        found.append(CheckerErrorKind.PARSE_ERROR)
    if _redirection_without_file(last):
        found.append(CheckerErrorKind.PARSE_ERROR)
    if any(_bad_pipe(word, index == len(words) - 1) for index, word in enumerate(words)):
        found.append(CheckerErrorKind.MISSING_COMMAND)
    for kind in found:
        checker_error(kind)
    return found