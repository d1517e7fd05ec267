"""Normalisation of redirections so each one becomes a single token."""

from __future__ import annotations

_QUOTES = "\"'"
_REDIRECTS = "<>"
_NAME_STOP = " ><\"'|"


def _find_redirection(text: str) -> int | None:
    """Index of the first ``<`` or ``>`` outside quotes, if any."""
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch in _REDIRECTS:
            return pos
        if ch in _QUOTES:
            close = text.find(ch, pos + 1)
            if close == -1:
                return None
            pos = close
        pos += 1
    return None


def translate_files(text: str) -> str:
    """Rewrite ``cmd >  file`` forms as ``cmd  >file``.

    Every redirection gets a leading space and its operator is glued to the
    file name that follows, so the lexer sees one token for it.
    """
    pieces: list[str] = []
    rest = text
    while True:
        start = _find_redirection(rest)
        if start is None:
            pieces.append(rest)
            break
        op_end = start + 1
        if rest[op_end:op_end + 1] == rest[start]:
            op_end += 1
        name_start = op_end
        while rest[name_start:name_start + 1] == " ":
            name_start += 1
        name_end = name_start
        while name_end < len(rest) and rest[name_end] not in _NAME_STOP:
            name_end += 1
        pieces.append(rest[:start])
        pieces.append(" " + rest[start:op_end] + rest[name_start:name_end])
        rest = rest[name_end:]
    return "".join(pieces)