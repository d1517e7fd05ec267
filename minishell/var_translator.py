"""Expansion of ``$NAME`` and ``$?`` references in a command line."""

from __future__ import annotations

from collections.abc import Iterable

_QUOTES = "\"'"


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_name_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


def _lookup(name: str, env: Iterable[str], exitno: int) -> str:
    if name.startswith("?"):
        return str(exitno)
    for entry in env:
        if entry.startswith(name) and entry[len(name):len(name) + 1] == "=":
            return entry[len(name) + 1:]
    return ""


def _expand(text: str, start: int, env: Iterable[str], exitno: int) -> tuple[str, int]:
    """Expand the reference at ``start``; return the new text and scan position."""
    first = text[start + 1:start + 2]
    if not _is_alpha(first) and first not in ("_", "?"):
        return text, start + 1
    end = start + 1
    if text[end] == "?":
        end += 1
    else:
        while end < len(text) and _is_name_char(text[end]):
            end += 1
    if end < len(text) and text[end] in _QUOTES:
        end -= 1
    name = text[start + 1:end + 1]
    value = _lookup(name, env, exitno)
    if len(text) - end > 1 and text[end + 1] in _QUOTES:
        end += 1
    return text[:start] + value + text[end:], start + len(value)


def translate_vars(text: str, env: Iterable[str], exitno: int) -> str:
    """Replace variable references outside single quotes with their values.

    ``env`` holds ``NAME=value`` entries; ``$?`` becomes ``exitno``.
    """
    env = list(env)
    result = text
    pos = 0
    in_single = False
    in_double = False
    while pos < len(result):
        ch = result[pos]
        if ch == '"':
            in_double = not in_double
        elif ch == "'" and not in_double:
            in_single = not in_single
        if ch == "$" and not in_single:
            result, pos = _expand(result, pos, env, exitno)
        else:
            pos += 1
    return result