"""From a raw command line to a list of parsed commands."""

from __future__ import annotations

from collections.abc import Iterable

from minishell.file_translator import translate_files
from minishell.lexer import lex
from minishell.parser import Command, parse
from minishell.var_translator import translate_vars

_QUOTES = "\"'"


def _pipe_index(text: str) -> int | None:
    """Index of the first ``|`` outside quotes, if any."""
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch == "|":
            return pos
        if ch in _QUOTES:
            close = text.find(ch, pos + 1)
            if close == -1:
                return None
            pos = close
        pos += 1
    return None


def divide_input(text: str) -> list[str]:
    """Split ``text`` into the command strings of a pipeline.

    Pipes inside quotes do not split. A single trailing pipe adds no empty
    command; an empty text gives an empty list.
    """
    segments: list[str] = []
    rest = text
    while rest:
        index = _pipe_index(rest)
        if index is None:
            segments.append(rest)
            break
        segments.append(rest[:index])
        rest = rest[index + 1:]
    return segments


def initial_translation(text: str, env: Iterable[str], exitno: int) -> str:
    """Expand variables, then normalise redirections."""
    return translate_files(translate_vars(text, env, exitno))


def remove_quotes(text: str) -> str:
    """Drop matching quote pairs, keeping what they enclose."""
    pieces: list[str] = []
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch in _QUOTES:
            close = text.find(ch, pos + 1)
            if close == -1:
                close = len(text)
            pieces.append(text[pos + 1:close])
            pos = close + 1
        else:
            pieces.append(ch)
            pos += 1
    return "".join(pieces)


def process_input(text: str, env: Iterable[str], exitno: int) -> list[Command]:
    """Expand, split and parse a command line into its pipeline of commands."""
    commands: list[Command] = []
    for segment in divide_input(initial_translation(text, list(env), exitno)):
        command = parse(lex(segment))
        command.args = [remove_quotes(arg) for arg in command.args]
        commands.append(command)
    return commands