"""Turning a command's lexemes into a :class:`Command`."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

_INPUT = "<"
_OUTPUT = ">"


@dataclass
class Command:
    """One simple command of a pipeline.

    ``input`` and ``output`` keep their operator prefix, e.g. ``"<file"``,
    ``"<<EOF"``, ``">file"`` or ``">>file"``.
    """

    args: list[str] = field(default_factory=list)
    input: str | None = None
    output: str | None = None


def parse(lexems: Iterable[str]) -> Command:
    """Build a command from lexemes.

    Lexemes starting with ``<`` or ``>`` are redirections; when a command
    has several of the same direction, the first one is kept. Every other
    lexeme is an argument, in order.
    """
    command = Command()
    for lexem in lexems:
        if lexem.startswith(_INPUT):
            if command.input is None:
                command.input = lexem
        elif lexem.startswith(_OUTPUT):
            if command.output is None:
                command.output = lexem
        else:
            command.args.append(lexem)
    return command